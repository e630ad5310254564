# Copyright (c) Syntropy Systems
"""fraudboard dashboard - FastAPI server with HTMX + Tailwind."""
from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol, cast

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates

import fraudboard
from fraudboard.config import load_config
from fraudboard.models.base import FraudboardBaseModel
from fraudboard.presentation import (
    curve_area,
    curve_polyline,
    format_percent,
    stat_cards,
)
from fraudboard.state import DashboardStateMachine

if TYPE_CHECKING:
    from fraudboard.config import FraudboardConfig
    from fraudboard.models.view import DashboardViewModel

# Setup paths
DASHBOARD_DIR = Path(__file__).parent
TEMPLATES_DIR = DASHBOARD_DIR / "templates"
CHART_WIDTH = 600
CHART_HEIGHT = 300
HTTP_ACCEPTED = 202

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


class RefreshResponse(FraudboardBaseModel):
    """Response from starting a refresh."""

    message: str
    cycle: int


class _TemplateEnv(Protocol):
    filters: dict[str, object]
    globals: dict[str, object]


# Add custom filters to Jinja2
templates_env = cast("_TemplateEnv", templates.env)
templates_env.filters["format_percent"] = format_percent

# Add global template variables
templates_env.globals["version"] = fraudboard.__version__
templates_env.globals["chart_width"] = CHART_WIDTH
templates_env.globals["chart_height"] = CHART_HEIGHT


def panel_context(view: DashboardViewModel) -> dict[str, object]:
    """Template variables for rendering a view model."""
    curve = view.curve or ()
    return {
        "view": view,
        "cards": stat_cards(view.metrics) if view.metrics is not None else [],
        "polyline": curve_polyline(curve, CHART_WIDTH, CHART_HEIGHT),
        "area": curve_area(curve, CHART_WIDTH, CHART_HEIGHT),
        "point_count": len(curve),
    }


def create_app(
    machine: DashboardStateMachine | None = None,
    config: FraudboardConfig | None = None,
) -> FastAPI:
    """Create the dashboard application.

    Args:
        machine: State machine to display (built from config when omitted)
        config: Configuration used to build a state machine; loaded from
            .fraudboard/config.yaml when neither argument is given

    Returns:
        Configured FastAPI application

    """
    if machine is None:
        machine = DashboardStateMachine.from_config(config or load_config())

    app = FastAPI(title="fraudboard dashboard", docs_url=None, redoc_url=None)
    app.state.machine = machine

    def current_view() -> DashboardViewModel:
        # First request loads synchronously so the page never starts blank
        if machine.latest_cycle == 0:
            return machine.load()
        return machine.current

    @app.get("/", response_class=HTMLResponse)
    def index(request: Request) -> HTMLResponse:
        """Render the main dashboard view."""
        return templates.TemplateResponse(request, "index.html", panel_context(current_view()))

    @app.get("/partials/panel", response_class=HTMLResponse)
    def panel_partial(request: Request) -> HTMLResponse:
        """Render the results panel for HTMX polling."""
        return templates.TemplateResponse(
            request, "partials/panel.html", panel_context(current_view())
        )

    @app.get("/api/v1/dashboard")
    def dashboard_view() -> JSONResponse:
        """Return the published view model."""
        return JSONResponse(current_view().model_dump(mode="json"))

    @app.post("/api/v1/refresh", status_code=HTTP_ACCEPTED, response_model=RefreshResponse)
    def refresh() -> RefreshResponse:
        """Start a background load cycle."""
        _ = machine.refresh_in_background()
        return RefreshResponse(message="Refresh started", cycle=machine.latest_cycle)

    return app
