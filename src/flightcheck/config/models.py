"""Configuration models for flightcheck."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from flightcheck.core.constants import (
    MAX_CHILDREN_PER_ADULT,
    MAX_INFANTS_PER_ADULT,
    MAX_PASSENGERS,
)

# Config file version constants
SUPPORTED_VERSIONS = frozenset({"1.0"})
CURRENT_VERSION = "1.0"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class PassengerLimits(BaseModel):
    """Numeric limits used by the passenger rules."""

    max_total: int = Field(
        default=MAX_PASSENGERS, ge=1, description="Most passengers on one booking"
    )
    max_children_per_adult: int = Field(
        default=MAX_CHILDREN_PER_ADULT, ge=0, description="Children each adult may accompany"
    )
    max_infants_per_adult: int = Field(
        default=MAX_INFANTS_PER_ADULT, ge=0, description="Infants each adult may accompany"
    )


class ValidatorConfig(BaseModel):
    """Booking validator configuration."""

    timezone: str | None = Field(
        default=None,
        description="IANA zone used by the system clock to decide 'today' (None = local)",
    )
    limits: PassengerLimits = Field(default_factory=PassengerLimits)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(default="INFO", description="Log level for flightcheck loggers")
    json_log_file: str | None = Field(
        default=None, description="Rotating JSON log file path (disabled when None)"
    )

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


class FlightCheckConfig(BaseModel):
    """Top-level flightcheck configuration."""

    version: str = Field(default=CURRENT_VERSION, description="Config format version")
    validator: ValidatorConfig = Field(default_factory=ValidatorConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("version", mode="before")
    @classmethod
    def _check_version(cls, value: object) -> object:
        # YAML reads 1.0 as a float
        if isinstance(value, float):
            value = str(value)
        if value not in SUPPORTED_VERSIONS:
            raise ValueError(
                f"Unsupported config version '{value}'. Supported: {sorted(SUPPORTED_VERSIONS)}"
            )
        return value
