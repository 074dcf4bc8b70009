import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import Settings, get_settings
from app.routers.catalog import router as catalog_router
from app.routers.wizard import router as wizard_router
from app.services.session import SessionRegistry

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Quote wizard API starting")

    yield

    app.state.registry.close()
    logger.info("Quote wizard API shut down")

def create_app(settings: Optional[Settings] = None, current_year: Optional[int] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title="Quote Wizard API", lifespan=lifespan)
    app.state.registry = SessionRegistry(
        transition_delay=settings.transition_delay,
        current_year=current_year,
        max_sessions=settings.max_sessions,
        idle_timeout=settings.session_idle_timeout,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(wizard_router)
    app.include_router(catalog_router)

    @app.get("/health")
    def health_check():
        return {"status": "healthy", "sessions": len(app.state.registry)}

    return app

app = create_app()
