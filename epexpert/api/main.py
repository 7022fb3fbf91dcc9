"""FastAPI application bootstrap."""
from __future__ import annotations

from fastapi import FastAPI

from ..config import get_settings
from .core.logging import register_middleware, setup_logging
from .core.security import enable_cors
from .routers import health, observations, pathway

settings = get_settings()
setup_logging(settings.log_level)

app = FastAPI(title=settings.app_name, version=settings.api_version)

register_middleware(app)
enable_cors(app)

app.include_router(health.router)
app.include_router(observations.router)
app.include_router(pathway.router)


@app.get("/")
def root() -> dict[str, str]:
    return {"message": settings.app_name, "health": "/health"}
