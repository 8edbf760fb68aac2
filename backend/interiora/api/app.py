"""FastAPI application: create_app factory with /api endpoints."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

# Load .env from project root (backend/../.env or backend/.env)
_backend_dir = Path(__file__).resolve().parent.parent.parent
_project_root = _backend_dir.parent
load_dotenv(_project_root / ".env")
load_dotenv(_backend_dir / ".env")

from interiora.engine import ENGINE_VERSION
from interiora.exceptions import EstimatorError
from interiora.models.enums import HomeSizeClass, QualityTier
from interiora.models.home import Dimensions, HomeConfiguration, SelectionEntry

if TYPE_CHECKING:
    from interiora.engine import EstimateEngine
    from interiora.models.estimate import Estimate

logger = logging.getLogger(__name__)


class EstimateRequest(BaseModel):
    """Body of POST /api/estimate."""

    home: HomeConfiguration
    selections: list[SelectionEntry] = Field(default_factory=list)


def _estimate_response(estimate: Estimate) -> dict[str, Any]:
    return {
        "estimate": estimate.model_dump(mode="json"),
        "export_dict": estimate.to_export_dict(),
        "summary_dict": estimate.to_summary_dict(),
    }


def _sample_selections() -> list[SelectionEntry]:
    return [
        SelectionEntry(
            item_id="tv-unit",
            selected=True,
            user_dimensions=Dimensions(length=8, width=6),
        ),
        SelectionEntry(
            item_id="wardrobe",
            selected=True,
            user_dimensions=Dimensions(length=8, width=7),
            quantity=2,
        ),
        SelectionEntry(item_id="full-home-flooring", selected=True),
        SelectionEntry(item_id="smart-lock", selected=True),
        SelectionEntry(item_id="electrical", selected=True),
        SelectionEntry(item_id="full-house-painting", selected=True),
    ]


def create_app(*, engine: EstimateEngine | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    engine
        Optional pre-built estimate engine for dependency injection (e.g.
        tests). If not provided, one is created from environment variables
        on first request.
    """
    app = FastAPI(title="Interiora", version=ENGINE_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject mocks
    app.state.engine = engine

    def _get_engine() -> EstimateEngine:
        eng: EstimateEngine | None = app.state.engine
        if eng is not None:
            return eng
        # Lazy-create from environment
        from interiora.api.deps import create_engine

        eng = create_engine()
        app.state.engine = eng
        return eng

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": ENGINE_VERSION}

    # ------------------------------------------------------------------
    # POST /api/estimate
    # ------------------------------------------------------------------

    @app.post("/api/estimate")
    def estimate(request: EstimateRequest) -> dict[str, Any]:
        try:
            result = _get_engine().estimate(request.home, request.selections)
        except EstimatorError as exc:
            logger.exception("Estimator error during estimate")
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return _estimate_response(result)

    # ------------------------------------------------------------------
    # GET /api/sample-estimate
    # ------------------------------------------------------------------

    @app.get("/api/sample-estimate")
    def sample_estimate() -> dict[str, Any]:
        home = HomeConfiguration.with_default_area(
            HomeSizeClass.THREE_BHK, QualityTier.PREMIUM
        )
        try:
            result = _get_engine().estimate(home, _sample_selections())
        except EstimatorError as exc:
            logger.exception("Estimator error during sample estimate")
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        response = _estimate_response(result)
        response["home"] = home.model_dump(mode="json")
        return response

    return app
