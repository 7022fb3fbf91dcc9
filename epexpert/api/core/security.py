"""Security utilities such as CORS configuration."""
from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ...config import get_settings


def enable_cors(app: FastAPI) -> None:
    """Allow the form front-end origins configured in CORS_ALLOW_ORIGINS."""

    origins = get_settings().cors_allow_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
