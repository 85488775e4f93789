"""
GreenBit Carbon Dashboard — Entry Point
=======================================
FastAPI application that keeps the employee roster and facility inputs
in memory, lets employees log commutes, and serves the admin view that
allocates electricity, cloud, hardware and commute emissions.
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import Settings, settings
from api.routes import router as api_router
from db.store import create_store
from services.mock_data import seed_store
from utils.helpers import logger


def create_app(config: Optional[Settings] = None) -> FastAPI:
    """Application factory."""
    config = config or settings
    logger.setLevel(config.LOG_LEVEL.upper())

    app = FastAPI(
        title="GreenBit Carbon Dashboard",
        description="Bottom-up commute and facility emission tracking",
        version="0.1.0",
    )

    # ── CORS (allow frontend origin) ──────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Application state ─────────────────────────────────
    store = create_store(config)
    seed_store(store, config.MOCK_ROSTER_SIZE, config.MOCK_SEED)
    app.state.store = store

    # ── Register routers ──────────────────────────────────
    app.include_router(api_router, prefix="/api")

    # ── Startup events ────────────────────────────────────
    @app.on_event("startup")
    async def on_startup():
        logger.info("GreenBit ready with %d employees", len(app.state.store.roster()))

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
