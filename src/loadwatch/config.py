"""Configuration: shared alert thresholds and application settings."""

import math
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Ten years of weekly history
MAX_BASELINE_WEEKS = 520


class Thresholds(BaseModel):
    """Alert thresholds shared by every athlete.

    Invalid, empty, non-finite, zero or negative values fall back to the
    field default instead of failing validation. Week counts are truncated
    and capped at MAX_BASELINE_WEEKS. The upper-case keys used by exported
    snapshots are accepted as aliases.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    monotony_max: float = Field(
        default=2.0,
        validation_alias=AliasChoices("monotony_max", "MONOTONIE"),
        description="Monotony ceiling",
    )
    strain_max: float = Field(
        default=8000.0,
        validation_alias=AliasChoices("strain_max", "STRAIN"),
        description="Strain ceiling (display only, zones use fixed cut-points)",
    )
    low_health: float = Field(
        default=60.0,
        validation_alias=AliasChoices("low_health", "SANTE_BASSE"),
        description="Low health score floor (0-100)",
    )
    sleep_drop_pct: float = Field(
        default=20.0,
        validation_alias=AliasChoices("sleep_drop_pct", "SLEEP_DROP_PCT"),
        description="Sleep quality drop vs baseline, in percent",
    )
    symptoms_increase_pct: float = Field(
        default=25.0,
        validation_alias=AliasChoices("symptoms_increase_pct", "SYMPTOMS_INCR_PCT"),
        description="Symptom burden increase vs baseline, in percent",
    )
    sleep_hours_drop_pct: float = Field(
        default=20.0,
        validation_alias=AliasChoices("sleep_hours_drop_pct", "SLEEP_HOURS_DROP_PCT"),
        description="Sleep duration drop vs baseline, in percent",
    )
    baseline_weeks: int = Field(
        default=4,
        validation_alias=AliasChoices("baseline_weeks", "BASELINE_WEEKS"),
        description="Number of trailing weeks used for baselines",
    )

    @field_validator("*", mode="before")
    @classmethod
    def coerce_to_default(cls, v: Any, info: ValidationInfo) -> Any:
        """Replace unusable values with the field default."""
        default = cls.model_fields[info.field_name].default
        if isinstance(v, bool) or v is None:
            return default
        try:
            number = float(v)
        except (TypeError, ValueError, OverflowError):
            return default
        if not math.isfinite(number) or number <= 0:
            return default
        if isinstance(default, int):
            return min(int(number), MAX_BASELINE_WEEKS) or default
        return number

    def updated(self, **changes: Any) -> "Thresholds":
        """Return a new Thresholds with ``changes`` applied and coerced."""
        values = self.model_dump()
        values.update(changes)
        return Thresholds.model_validate(values)

    def to_dict(self) -> dict:
        return self.model_dump()


DEFAULT_THRESHOLDS = Thresholds()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LOADWATCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    log_level: str = "INFO"

    # Default snapshot for the CLI; demo data is used when unset
    snapshot_path: Optional[Path] = None

    thresholds: Thresholds = Field(default_factory=Thresholds)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
