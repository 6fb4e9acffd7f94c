from __future__ import annotations

from dataclasses import dataclass, fields, replace
from functools import lru_cache
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(env_prefix="NET_TIMING_", env_file=".env", extra="ignore")

    # Estimator settings
    force_coarse_estimates: bool = Field(
        False,
        description="Skip handshake timing and use download/send-start estimates",
    )
    coarse_estimate_multiplier: float = Field(
        0.5,
        gt=0,
        description="Factor applied to every coarse RTT estimate",
    )

    # Logging settings
    log_level: str = Field("INFO", description="Level for package loggers")


@lru_cache()
def get_settings() -> Settings:
    """Return a singleton settings instance."""
    return Settings()


settings = get_settings()


@dataclass(frozen=True)
class EstimatorOptions:
    """Explicit options for the RTT and response time estimators.

    Parameters
    ----------
    force_coarse_estimates:
        Handshake timing is used when available; setting this compares the
        coarse estimates against it by discarding the handshake samples.
    coarse_estimate_multiplier:
        Coarse estimates include lots of extra time and noise, every coarse
        sample is multiplied by this factor.
    """

    force_coarse_estimates: bool = False
    coarse_estimate_multiplier: float = 0.5

    def __post_init__(self) -> None:
        if self.coarse_estimate_multiplier <= 0:
            raise ValueError("coarse_estimate_multiplier must be positive")

    @classmethod
    def from_settings(cls, source: Settings | None = None) -> "EstimatorOptions":
        """Build options from ``source`` or the environment-backed settings."""
        source = source or get_settings()
        return cls(
            force_coarse_estimates=source.force_coarse_estimates,
            coarse_estimate_multiplier=source.coarse_estimate_multiplier,
        )

    def merged(self, **overrides: Any) -> "EstimatorOptions":
        """Return a copy with ``overrides`` applied; ``None`` values are ignored."""
        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise TypeError(f"Unknown estimator options: {', '.join(sorted(unknown))}")
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self


def resolve_options(options: EstimatorOptions | None = None, **overrides: Any) -> EstimatorOptions:
    """Merge ``overrides`` into ``options`` or the settings defaults."""
    base = options if options is not None else EstimatorOptions.from_settings()
    return base.merged(**overrides)


__all__ = ["Settings", "get_settings", "settings", "EstimatorOptions", "resolve_options"]
