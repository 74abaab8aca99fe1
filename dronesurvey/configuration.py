"""Mini README: Centralised configuration for the Dronesurvey planner service.

Structure:
    * PlannerSettings - Pydantic settings model for runtime and planning knobs.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Values are read from ``DRONESURVEY_*`` environment variables or a local
    ``.env`` file. The planner core never reads settings itself; the flight
    plan service and the interfaces pass the relevant values in explicitly.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class PlannerSettings(BaseSettings):
    """Runtime configuration for the coverage planner and its HTTP surface."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level applied by the command line entry point.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the planning service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the planning service exposes.",
        ge=1,
        le=65535,
    )
    base_spacing_meters: float = Field(
        50.0,
        description="Sweep line spacing in metres before overlap is applied.",
        gt=0,
    )
    perimeter_offset_degrees: float = Field(
        0.0001,
        description=(
            "Inward step, in degrees, between concentric perimeter rings."
            " Not scaled with latitude."
        ),
        gt=0,
    )
    max_perimeter_rings: int = Field(
        3,
        description="Upper bound on concentric rings flown by the perimeter pattern.",
        ge=1,
        le=10,
    )
    cruise_speed_mps: float = Field(
        10.0,
        description="Ground speed used to estimate mission duration.",
        gt=0,
    )
    flight_estimates: Literal["derived", "placeholder"] = Field(
        "derived",
        description=(
            "'derived' computes distance and duration from the waypoints;"
            " 'placeholder' reports the legacy fixed 1000 m / 15 min figures."
        ),
    )

    class Config:
        env_prefix = "DRONESURVEY_"
        env_file = ".env"
        case_sensitive = False

    @validator("log_level", pre=True)
    def _normalise_level(cls, value: str) -> str:
        """Accept lower-case level names from the environment."""

        return str(value).strip().upper()


@lru_cache()
def get_settings() -> PlannerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return PlannerSettings()
