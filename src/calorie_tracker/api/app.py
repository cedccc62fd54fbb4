"""FastAPI application factory."""

import logging
from uuid import UUID

from fastapi import FastAPI, Query, Request, Response, status
from fastapi.responses import JSONResponse

from calorie_tracker.api.models import EntryCreate, QuickEntryCreate
from calorie_tracker.api.serializers import (
    entry_payload,
    history_payload,
    summary_payload,
)
from calorie_tracker.api.settings import router as settings_router
from calorie_tracker.app_logging import configure_logging
from calorie_tracker.containers import AppContainer
from calorie_tracker.domain.errors import NotFoundError, ValidationError
from calorie_tracker.services.export import export_csv, export_filename

DEFAULT_HISTORY_DAYS = 7
MAX_HISTORY_DAYS = 366
UNPROCESSABLE_STATUS = 422


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    app.include_router(settings_router)

    @app.exception_handler(ValidationError)
    async def validation_error_handler(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        logger.info("Rejected input: path=%s reason=%s", request.url.path, exc)
        return JSONResponse(
            status_code=UNPROCESSABLE_STATUS,
            content={"detail": str(exc)},
        )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/api/entries/today")
    async def todays_entries(request: Request) -> list[dict[str, object]]:
        """Return today's entries in insertion order."""
        state_container: AppContainer = request.app.state.container
        return [
            entry_payload(entry)
            for entry in state_container.entry_store.todays_entries()
        ]

    @app.get("/api/entries/{entry_id}")
    async def get_entry(entry_id: UUID, request: Request) -> dict[str, object]:
        """Return a single entry."""
        state_container: AppContainer = request.app.state.container
        return entry_payload(state_container.entry_store.get_entry(entry_id))

    @app.post("/api/entries", status_code=status.HTTP_201_CREATED)
    async def add_entry(payload: EntryCreate, request: Request) -> dict[str, object]:
        """Log a food entry for today."""
        state_container: AppContainer = request.app.state.container
        entry = state_container.entry_store.add_entry(
            payload.name, payload.calories, payload.meal
        )
        return entry_payload(entry)

    @app.post("/api/entries/quick", status_code=status.HTTP_201_CREATED)
    async def add_quick_entry(
        payload: QuickEntryCreate, request: Request
    ) -> dict[str, object]:
        """Log a quick snack entry."""
        state_container: AppContainer = request.app.state.container
        entry = state_container.entry_store.add_quick_entry(payload.amount)
        return entry_payload(entry)

    @app.delete("/api/entries/{entry_id}")
    async def delete_entry(entry_id: UUID, request: Request) -> dict[str, str]:
        """Delete an entry; unknown ids succeed without changes."""
        state_container: AppContainer = request.app.state.container
        state_container.entry_store.delete_entry(entry_id)
        return {"status": "ok"}

    @app.delete("/api/days/today")
    async def clear_today(request: Request) -> dict[str, str]:
        """Delete every entry logged today."""
        state_container: AppContainer = request.app.state.container
        state_container.entry_store.clear_day()
        return {"status": "ok"}

    @app.get("/api/summary")
    async def summary(request: Request) -> dict[str, object]:
        """Return today's total, goal and deficit."""
        state_container: AppContainer = request.app.state.container
        return summary_payload(state_container.entry_store.summary())

    @app.get("/api/history")
    async def history(
        request: Request,
        days: int = Query(default=DEFAULT_HISTORY_DAYS, ge=1, le=MAX_HISTORY_DAYS),
    ) -> list[dict[str, object]]:
        """Return per-day totals ending today, oldest first."""
        state_container: AppContainer = request.app.state.container
        return history_payload(state_container.entry_store.last_n_days_totals(days))

    @app.get("/api/export.csv")
    async def export_entries(request: Request) -> Response:
        """Download every entry as CSV."""
        state_container: AppContainer = request.app.state.container
        store = state_container.entry_store
        filename = export_filename(store.today())
        return Response(
            content=export_csv(store.all_entries()),
            media_type="text/csv",
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )

    return app
