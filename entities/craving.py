"""
Craving domain entity.

Framework-agnostic value object describing one craving episode. The
entity does not validate intensity; range checks belong to the use case
that creates it.
"""

from datetime import datetime, timedelta
from enum import Enum
from typing import Optional, Tuple
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from utils.date_util import ensure_utc, utc_now


class IntensityLevel(str, Enum):
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"
    UNKNOWN = "Unknown"


class CravingEntity(BaseModel):
    """A logged craving episode."""
    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4, description="Unique, immutable identifier")
    timestamp: datetime = Field(default_factory=utc_now, description="When the craving happened (UTC)")
    intensity: int = Field(..., description="Self-reported strength, 1-10")
    duration: Optional[float] = Field(default=None, description="How long the craving lasted, in seconds")
    triggers: Tuple[str, ...] = Field(default=(), description="Trigger labels in selection order")
    notes: Optional[str] = Field(default=None, description="Free-text notes")
    location: Optional[str] = Field(default=None, description="Where the craving happened")
    management_strategy: Optional[str] = Field(default=None, description="What was done to manage it")
    was_managed_successfully: bool = Field(default=False, description="Whether the craving was resisted")

    @field_validator("timestamp")
    @classmethod
    def _timestamp_to_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)

    @property
    def intensity_level(self) -> IntensityLevel:
        if 1 <= self.intensity <= 3:
            return IntensityLevel.LOW
        if 4 <= self.intensity <= 6:
            return IntensityLevel.MODERATE
        if 7 <= self.intensity <= 10:
            return IntensityLevel.HIGH
        return IntensityLevel.UNKNOWN

    def is_within_last(self, hours: int) -> bool:
        cutoff = utc_now() - timedelta(hours=hours)
        return self.timestamp >= cutoff
