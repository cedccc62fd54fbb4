"""Settings API endpoints: goal, BMR, theme and reset."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from calorie_tracker.api.models import BmrRequest, GoalUpdate, ThemeUpdate
from calorie_tracker.api.serializers import settings_payload
from calorie_tracker.services.energy import estimate_energy, validate_bmr_inputs

if TYPE_CHECKING:
    from calorie_tracker.containers import AppContainer

router = APIRouter(prefix="/api", tags=["settings"])


@router.get("/settings")
async def get_settings(request: Request) -> dict[str, object]:
    """Return the current settings."""
    container: AppContainer = request.app.state.container
    return settings_payload(container.entry_store.settings)


@router.put("/goal")
async def set_goal(payload: GoalUpdate, request: Request) -> dict[str, object]:
    """Store the daily calorie goal."""
    container: AppContainer = request.app.state.container
    return {"goal": container.entry_store.set_goal(payload.goal)}


@router.post("/bmr")
async def calculate_bmr(payload: BmrRequest, request: Request) -> dict[str, object]:
    """Compute BMR and TDEE, store them and return the resulting goal."""
    container: AppContainer = request.app.state.container
    inputs = validate_bmr_inputs(
        age=payload.age,
        sex=payload.sex,
        weight=payload.weight,
        height=payload.height,
        activity=payload.activity,
    )
    estimate = estimate_energy(inputs)
    store = container.entry_store
    store.set_bmr_result(estimate.bmr, estimate.tdee, inputs)
    return {
        "bmr": estimate.bmr,
        "tdee": estimate.tdee,
        "goal": store.settings.daily_goal,
    }


@router.delete("/bmr")
async def clear_bmr(request: Request) -> dict[str, str]:
    """Forget the stored BMR result."""
    container: AppContainer = request.app.state.container
    container.entry_store.clear_bmr_result()
    return {"status": "ok"}


@router.put("/theme")
async def set_theme(payload: ThemeUpdate, request: Request) -> dict[str, str]:
    """Store the UI theme."""
    container: AppContainer = request.app.state.container
    container.entry_store.set_theme(payload.theme)
    return {"theme": payload.theme}


@router.post("/theme/toggle")
async def toggle_theme(request: Request) -> dict[str, str]:
    """Flip the UI theme."""
    container: AppContainer = request.app.state.container
    return {"theme": container.entry_store.toggle_theme()}


@router.post("/reset")
async def reset_all(request: Request) -> dict[str, str]:
    """Delete all entries and settings."""
    container: AppContainer = request.app.state.container
    container.entry_store.clear_all()
    return {"status": "ok"}
