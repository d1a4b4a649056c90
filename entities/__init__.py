"""Domain entities.

Immutable pydantic value objects with no knowledge of persistence. Each
family lives in its own module and is re-exported here.
"""

from .craving import CravingEntity, IntensityLevel  # noqa: F401
from .motivational_message import (  # noqa: F401
    MessageCategory,
    MotivationalMessageEntity,
    default_messages,
)
from .recording import RecordingEntity, RecordingPurpose, RecordingType  # noqa: F401

__all__ = [
    "CravingEntity",
    "IntensityLevel",
    "MessageCategory",
    "MotivationalMessageEntity",
    "RecordingEntity",
    "RecordingPurpose",
    "RecordingType",
    "default_messages",
]
