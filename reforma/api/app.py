"""FastAPI application: create_app factory with /api endpoints."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

# Load .env from the project root
_project_root = Path(__file__).resolve().parent.parent.parent
load_dotenv(_project_root / ".env")

from reforma.api.deps import Settings, load_settings  # noqa: E402
from reforma.exceptions import ReformaError, UnknownPhaseError  # noqa: E402
from reforma.models.enums import Phase  # noqa: E402
from reforma.models.pricing import FixedCost, UnitPrice  # noqa: E402
from reforma.models.room import Room  # noqa: E402
from reforma.models.schedule import ScheduleOverride, dump_overrides  # noqa: E402
from reforma.project import RenovationProject  # noqa: E402
from reforma.scheduling import apply_override, clear_override  # noqa: E402

logger = logging.getLogger(__name__)

API_VERSION = "0.1.0"

_OVERRIDE_FIELDS = ("duration", "start_day", "dependency")


class EstimateRequest(BaseModel):
    rooms: list[Room] = Field(default_factory=list)
    unit_prices: list[UnitPrice] = Field(default_factory=list)
    fixed_costs: list[FixedCost] = Field(default_factory=list)


class ScheduleRequest(BaseModel):
    rooms: list[Room] = Field(default_factory=list)
    fixed_costs: list[FixedCost] = Field(default_factory=list)
    overrides: dict[Phase, ScheduleOverride] = Field(default_factory=dict)


class OverrideRequest(BaseModel):
    """Merge one phase's override fields into an override map.

    Only the fields present in the request body are applied, so
    ``"dependency": null`` stores an explicit "no dependency".
    """

    overrides: dict[Phase, ScheduleOverride] = Field(default_factory=dict)
    phase_id: str
    duration: int | None = Field(default=None, ge=0)
    start_day: int | None = Field(default=None, ge=0)
    dependency: Phase | None = None


class ClearOverrideRequest(BaseModel):
    overrides: dict[Phase, ScheduleOverride] = Field(default_factory=dict)
    phase_id: str
    fields: list[str] = Field(default_factory=list)


def _estimate_payload(project: RenovationProject) -> dict[str, Any]:
    summary = project.estimate()
    return {
        "summary": summary.model_dump(mode="json"),
        "summary_dict": summary.to_summary_dict(),
        "fixed_costs": [fc.model_dump(mode="json") for fc in project.fixed_costs],
    }


def _schedule_payload(project: RenovationProject) -> dict[str, Any]:
    result = project.schedule()
    return {
        "quantities": project.phase_quantities().model_dump(mode="json"),
        "schedule": result.model_dump(mode="json"),
        "working_days": result.working_days,
        "weeks": result.weeks,
        "gantt": result.to_gantt_rows(),
    }


def create_app(
    *,
    settings: Settings | None = None,
    project: RenovationProject | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings for dependency injection (e.g. tests). If not
        provided, they are read from the environment via ``load_settings``.
    project
        Optional project backing the sample endpoints. If not provided, one
        is created via create_default_project on first request.
    """
    settings = settings or load_settings()
    logging.basicConfig(level=settings.log_level)

    app = FastAPI(title="Reforma", version=API_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject fixtures
    app.state.settings = settings
    app.state.project = project

    def _get_project() -> RenovationProject:
        proj: RenovationProject | None = app.state.project
        if proj is not None:
            return proj
        from reforma.factory import create_default_project

        proj = create_default_project()
        app.state.project = proj
        return proj

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": API_VERSION}

    # ------------------------------------------------------------------
    # POST /api/estimate
    # ------------------------------------------------------------------

    @app.post("/api/estimate")
    def estimate(body: EstimateRequest) -> dict[str, Any]:
        project = RenovationProject(
            rooms=body.rooms,
            unit_prices=body.unit_prices,
            fixed_costs=body.fixed_costs,
        )
        logger.info(
            "Estimating %d rooms against %d unit prices",
            len(project.rooms), len(project.unit_prices),
        )
        return _estimate_payload(project)

    # ------------------------------------------------------------------
    # POST /api/schedule
    # ------------------------------------------------------------------

    @app.post("/api/schedule")
    def schedule(body: ScheduleRequest) -> dict[str, Any]:
        project = RenovationProject(
            rooms=body.rooms,
            fixed_costs=body.fixed_costs,
            overrides=body.overrides,
        )
        return _schedule_payload(project)

    # ------------------------------------------------------------------
    # POST /api/schedule/override
    # ------------------------------------------------------------------

    @app.post("/api/schedule/override")
    def set_override(body: OverrideRequest) -> dict[str, Any]:
        fields = {
            name: getattr(body, name)
            for name in _OVERRIDE_FIELDS
            if name in body.model_fields_set
        }
        try:
            merged = apply_override(body.overrides, body.phase_id, **fields)
        except UnknownPhaseError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return {"overrides": dump_overrides(merged)}

    @app.post("/api/schedule/override/clear")
    def remove_override(body: ClearOverrideRequest) -> dict[str, Any]:
        try:
            cleared = clear_override(body.overrides, body.phase_id, *body.fields)
        except UnknownPhaseError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return {"overrides": dump_overrides(cleared)}

    # ------------------------------------------------------------------
    # Sample project
    # ------------------------------------------------------------------

    @app.get("/api/sample-project")
    def sample_project() -> dict[str, Any]:
        project = _get_project()
        return {
            "name": project.name,
            "rooms": [room.model_dump(mode="json") for room in project.rooms],
            "unit_prices": [p.model_dump(mode="json") for p in project.unit_prices],
            "fixed_costs": [fc.model_dump(mode="json") for fc in project.fixed_costs],
            "overrides": dump_overrides(project.overrides),
        }

    @app.get("/api/sample-estimate")
    def sample_estimate() -> dict[str, Any]:
        try:
            return _estimate_payload(_get_project())
        except ReformaError as exc:
            logger.exception("Error while estimating the sample project")
            raise HTTPException(status_code=500, detail=str(exc)) from exc

    @app.get("/api/sample-schedule")
    def sample_schedule() -> dict[str, Any]:
        try:
            return _schedule_payload(_get_project())
        except ReformaError as exc:
            logger.exception("Error while scheduling the sample project")
            raise HTTPException(status_code=500, detail=str(exc)) from exc

    return app
