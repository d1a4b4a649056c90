"""
Motivational message domain entity.

A fixed default set is seeded into an empty store; users can add their
own messages and give feedback on the ones they see.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from utils.date_util import ensure_utc, utc_now


class MessageCategory(str, Enum):
    URGE_MANAGEMENT = "Urge Management"
    SELF_COMPASSION = "Self-Compassion"
    PROGRESS_REMINDER = "Progress Reminder"
    HEALTH_BENEFITS = "Health Benefits"
    COPING_STRATEGIES = "Coping Strategies"
    PERSONAL_REASON = "Personal Reason"


class MotivationalMessageEntity(BaseModel):
    """A message shown to the user during or after a craving."""
    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4, description="Unique, immutable identifier")
    created_at: datetime = Field(default_factory=utc_now, description="When the message was created (UTC)")
    category: MessageCategory = Field(..., description="Message category")
    content: str = Field(..., description="Message text")
    is_active: bool = Field(default=True, description="Whether the message is eligible to be shown")
    is_user_created: bool = Field(default=False, description="Written by the user rather than seeded")
    display_priority: int = Field(default=5, description="Higher values are shown more often")
    times_shown: int = Field(default=0, description="How many times the message was shown")
    last_shown_at: Optional[datetime] = Field(default=None, description="Last time the message was shown (UTC)")
    was_helpful: Optional[bool] = Field(default=None, description="User feedback; None when not given")

    @field_validator("created_at", "last_shown_at")
    @classmethod
    def _times_to_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return ensure_utc(value)

    def mark_as_shown(self) -> "MotivationalMessageEntity":
        return self.model_copy(update={
            "times_shown": self.times_shown + 1,
            "last_shown_at": utc_now(),
        })

    def with_feedback(self, helpful: bool) -> "MotivationalMessageEntity":
        return self.model_copy(update={"was_helpful": helpful})


def default_messages() -> List[MotivationalMessageEntity]:
    """The built-in messages seeded into an empty store (fresh ids each call)."""
    return [
        MotivationalMessageEntity(
            category=MessageCategory.URGE_MANAGEMENT,
            content="This craving will pass in 10-15 minutes. You've got this.",
            display_priority=10,
        ),
        MotivationalMessageEntity(
            category=MessageCategory.URGE_MANAGEMENT,
            content="Ride the wave. Cravings peak and then subside. You're stronger than this urge.",
            display_priority=10,
        ),
        MotivationalMessageEntity(
            category=MessageCategory.SELF_COMPASSION,
            content="Be kind to yourself. Recovery is a journey, not a destination.",
            display_priority=8,
        ),
        MotivationalMessageEntity(
            category=MessageCategory.HEALTH_BENEFITS,
            content="Your body is healing. Your mind is clearing. Keep going.",
            display_priority=7,
        ),
        MotivationalMessageEntity(
            category=MessageCategory.COPING_STRATEGIES,
            content="Try: Deep breathing, call a friend, go for a walk, listen to your recording.",
            display_priority=9,
        ),
        MotivationalMessageEntity(
            category=MessageCategory.PROGRESS_REMINDER,
            content="Look how far you've come. Don't let one moment erase all your progress.",
            display_priority=9,
        ),
    ]
