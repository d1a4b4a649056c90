"""
Recording domain entity.

Audio/video clips the user records for themselves. The file itself lives
in media storage; the entity only carries its path relative to the media
root.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from utils.date_util import ensure_utc, utc_now


class RecordingType(str, Enum):
    VIDEO = "Video"
    AUDIO = "Audio"

    @property
    def file_extension(self) -> str:
        if self is RecordingType.VIDEO:
            return "mov"
        return "m4a"


class RecordingPurpose(str, Enum):
    MOTIVATIONAL = "Motivational"
    CRAVING_MOMENT = "Craving Moment"
    REFLECTION = "Reflection"
    MILESTONE = "Milestone"


class RecordingEntity(BaseModel):
    """An audio or video recording."""
    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4, description="Unique, immutable identifier")
    created_at: datetime = Field(default_factory=utc_now, description="When the recording was saved (UTC)")
    recording_type: RecordingType = Field(..., description="Audio or video")
    purpose: RecordingPurpose = Field(..., description="Why the recording was made")
    title: str = Field(..., description="User-facing title")
    file_url: str = Field(..., description="Path relative to the media root")
    duration: float = Field(default=0, description="Length in seconds")
    notes: Optional[str] = Field(default=None, description="Free-text notes")
    thumbnail_url: Optional[str] = Field(default=None, description="Thumbnail path relative to the media root")
    last_played_at: Optional[datetime] = Field(default=None, description="Last playback time (UTC)")
    play_count: int = Field(default=0, description="Number of playbacks")
    craving_id: Optional[UUID] = Field(default=None, description="Owning craving, if any")

    @field_validator("created_at", "last_played_at")
    @classmethod
    def _times_to_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return ensure_utc(value)

    @property
    def duration_formatted(self) -> str:
        minutes = int(self.duration) // 60
        seconds = int(self.duration) % 60
        return f"{minutes}:{seconds:02d}"

    def increment_play_count(self) -> "RecordingEntity":
        return self.model_copy(update={
            "last_played_at": utc_now(),
            "play_count": self.play_count + 1,
        })
