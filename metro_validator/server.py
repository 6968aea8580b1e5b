"""HTTP service exposing validation to the admin frontend."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .config import ValidationConfig
from .schema.errors import SnapshotLoadError, SnapshotValidationError
from .schema.loader import load_snapshot
from .validators.runner import build_report

logger = logging.getLogger(__name__)

SERVICE_NAME = "metro-validator"

# Vite dev server, common React port, Vite preview, production frontend
DEFAULT_ALLOWED_ORIGINS = [
    "http://localhost:5173",
    "http://localhost:3000",
    "http://localhost:4173",
    "https://where-is-my-metro-nine.vercel.app",
]


def create_app(
    db_path: str,
    config: ValidationConfig | None = None,
    allowed_origins: list[str] | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    Every request to ``/api/validate`` loads a fresh snapshot from
    ``db_path`` and runs a full validation on it.

    Args:
        db_path: Path to the SQLite database or YAML snapshot.
        config: Validation thresholds.
        allowed_origins: Origins allowed by CORS.

    Returns:
        The configured application.
    """
    app = FastAPI(title="Metro Data Validator", version=__version__)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins if allowed_origins is not None else DEFAULT_ALLOWED_ORIGINS,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok", "service": SERVICE_NAME, "version": __version__}

    @app.get("/api/validate")
    def validate():
        try:
            snapshot = load_snapshot(db_path)
        except (SnapshotLoadError, SnapshotValidationError) as e:
            logger.error("Failed to load %s: %s", db_path, e)
            return JSONResponse(
                status_code=500,
                content={"error": f"Failed to load database: {e}"},
            )

        report = build_report(snapshot, db_path, config)
        return report.to_dict()

    return app
