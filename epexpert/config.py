"""Runtime configuration for EP-Expert."""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Annotated, List

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from .schemas.policy import HestiaHemodynamicPolicy, HighWellsDdimerPolicy, ScoringPolicy


class Settings(BaseSettings):
    """Centralised application settings backed by environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # API / metadata
    app_name: str = Field(default="EP-Expert API", alias="APP_NAME")
    api_version: str = Field(default="0.1.0", alias="API_VERSION")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Clinical content
    content_pack: str = Field(default="pe_pathway", alias="CONTENT_PACK")
    hestia_hemodynamic_policy: HestiaHemodynamicPolicy = Field(
        default=HestiaHemodynamicPolicy.COMPOSITE,
        alias="HESTIA_HEMODYNAMIC_POLICY",
    )
    high_wells_ddimer_policy: HighWellsDdimerPolicy = Field(
        default=HighWellsDdimerPolicy.AGE_ADJUSTED,
        alias="HIGH_WELLS_DDIMER_POLICY",
    )

    # CORS / UI
    cors_allow_origins: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["*"],
        alias=AliasChoices("CORS_ALLOW_ORIGINS", "ALLOWED_ORIGINS"),
    )

    @field_validator("cors_allow_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: object) -> List[str]:
        if value is None:
            return ["*"]
        if isinstance(value, str):
            if not value or value.strip() == "*":
                return ["*"]
            items = [item.strip() for item in value.split(",") if item.strip()]
            return items or ["*"]
        if isinstance(value, (list, tuple, set)):
            return [str(item).strip() for item in value if str(item).strip()]
        return ["*"]

    @field_validator("log_level", mode="after")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    def scoring_policy(self) -> ScoringPolicy:
        return ScoringPolicy(
            hestia_hemodynamic=self.hestia_hemodynamic_policy,
            high_wells_ddimer=self.high_wells_ddimer_policy,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
