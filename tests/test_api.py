"""Tests for the HTTP API."""

from uuid import uuid4

from fastapi.testclient import TestClient

from calorie_tracker.api.app import create_app
from calorie_tracker.containers import AppContainer
from tests.conftest import TODAY


def _client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))


def test_health(container: AppContainer) -> None:
    response = _client(container).get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_add_entries_and_summary(container: AppContainer) -> None:
    client = _client(container)

    created = client.post(
        "/api/entries", json={"name": "Toast", "calories": 150, "meal": "Breakfast"}
    )
    quick = client.post("/api/entries/quick", json={})

    assert created.status_code == 201
    assert created.json()["date"] == TODAY.isoformat()
    assert quick.json()["name"] == "100 kcal quick"

    summary = client.get("/api/summary").json()
    assert summary == {
        "date": "2024-03-15",
        "total": 250,
        "goal": 2000,
        "deficit": 1750,
        "remaining": 1750,
        "percent_of_goal": 13,
        "goal_reached": False,
    }

    today = client.get("/api/entries/today").json()
    assert [item["name"] for item in today] == ["Toast", "100 kcal quick"]


def test_invalid_entry_returns_422(container: AppContainer) -> None:
    response = _client(container).post(
        "/api/entries", json={"name": " ", "calories": 150, "meal": "Lunch"}
    )

    assert response.status_code == 422
    assert response.json() == {"detail": "Food name is required"}
    assert container.entry_store.all_entries() == []


def test_get_and_delete_entry(container: AppContainer) -> None:
    client = _client(container)
    entry = container.entry_store.add_entry("Egg", 80, "Breakfast")

    assert client.get(f"/api/entries/{entry.id}").json()["calories"] == 80

    assert client.delete(f"/api/entries/{entry.id}").status_code == 200
    assert client.delete(f"/api/entries/{entry.id}").status_code == 200
    assert client.get(f"/api/entries/{entry.id}").status_code == 404
    assert client.get(f"/api/entries/{uuid4()}").status_code == 404


def test_clear_today(container: AppContainer) -> None:
    client = _client(container)
    container.entry_store.add_entry("Egg", 80, "Breakfast")

    response = client.delete("/api/days/today")

    assert response.status_code == 200
    assert container.entry_store.todays_entries() == []


def test_history(container: AppContainer) -> None:
    client = _client(container)
    container.entry_store.add_entry("Egg", 80, "Breakfast")

    week = client.get("/api/history").json()
    assert len(week) == 7
    assert week[-1] == {"date": "2024-03-15", "total": 80}
    assert week[0]["date"] == "2024-03-09"

    assert len(client.get("/api/history", params={"days": 3}).json()) == 3
    assert client.get("/api/history", params={"days": 0}).status_code == 422
    assert client.get("/api/history", params={"days": 100_000_000}).status_code == 422
    assert len(client.get("/api/history", params={"days": 366}).json()) == 366


def test_goal_endpoint(container: AppContainer) -> None:
    client = _client(container)

    assert client.put("/api/goal", json={"goal": 1799.6}).json() == {"goal": 1800}
    assert client.put("/api/goal", json={"goal": -1}).status_code == 422
    assert client.get("/api/settings").json()["goal"] == 1800


def test_bmr_endpoint_sets_goal_from_tdee(container: AppContainer) -> None:
    client = _client(container)

    response = client.post(
        "/api/bmr",
        json={"age": 25, "sex": "male", "weight": 70, "height": 175, "activity": 1.2},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["bmr"] == 1673.75
    assert data["goal"] == 2009

    settings = client.get("/api/settings").json()
    assert settings["goal_set"] is True
    assert settings["bmr_inputs"]["age"] == 25

    assert client.delete("/api/bmr").status_code == 200
    assert client.get("/api/settings").json()["bmr"] is None


def test_bmr_endpoint_rejects_invalid_input(container: AppContainer) -> None:
    response = _client(container).post(
        "/api/bmr",
        json={"age": 25, "sex": "male", "weight": 0, "height": 175},
    )

    assert response.status_code == 422
    assert container.entry_store.settings.bmr is None


def test_theme_endpoints(container: AppContainer) -> None:
    client = _client(container)

    assert client.put("/api/theme", json={"theme": "dark"}).json() == {"theme": "dark"}
    assert client.post("/api/theme/toggle").json() == {"theme": "light"}
    assert client.put("/api/theme", json={"theme": "neon"}).status_code == 422


def test_reset(container: AppContainer) -> None:
    client = _client(container)
    container.entry_store.add_entry("Egg", 80, "Breakfast")
    container.entry_store.set_goal(1500)

    assert client.post("/api/reset").status_code == 200

    assert container.entry_store.all_entries() == []
    assert client.get("/api/settings").json()["goal"] == 2000


def test_export_csv(container: AppContainer) -> None:
    client = _client(container)
    entry = container.entry_store.add_entry('Pie "apple"', 320, "Dinner")

    response = client.get("/api/export.csv")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert 'filename="calorie-data-2024-03-15.csv"' in response.headers[
        "content-disposition"
    ]
    assert response.text.splitlines() == [
        "id,date,name,meal,calories",
        f'{entry.id},2024-03-15,"Pie ""apple""",Dinner,320',
    ]


def test_bmr_endpoint_rejects_tdee_below_one_kcal(container: AppContainer) -> None:
    client = _client(container)

    response = client.post(
        "/api/bmr",
        json={
            "age": 30,
            "sex": "female",
            "weight": 10,
            "height": 50,
            "activity": 0.001,
        },
    )

    assert response.status_code == 422
    assert container.entry_store.settings.bmr is None
    assert client.get("/api/summary").json()["goal"] == 2000
