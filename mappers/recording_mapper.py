"""
Mapper between RecordingEntity (domain) and RecordingModel (persistence).

Enum fields are stored as raw strings. Unknown stored values decode to
RecordingType.AUDIO and RecordingPurpose.MOTIVATIONAL.
"""

from entities.recording import RecordingEntity, RecordingPurpose, RecordingType
from models.recording import RecordingModel
from utils.date_util import ensure_utc


def decode_recording_type(raw: str) -> RecordingType:
    try:
        return RecordingType(raw)
    except ValueError:
        return RecordingType.AUDIO


def decode_purpose(raw: str) -> RecordingPurpose:
    try:
        return RecordingPurpose(raw)
    except ValueError:
        return RecordingPurpose.MOTIVATIONAL


def to_model(entity: RecordingEntity) -> RecordingModel:
    return RecordingModel(
        id=entity.id,
        created_at=ensure_utc(entity.created_at),
        recording_type=entity.recording_type.value,
        purpose=entity.purpose.value,
        title=entity.title,
        notes=entity.notes,
        file_url=entity.file_url,
        duration=entity.duration,
        thumbnail_url=entity.thumbnail_url,
        last_played_at=ensure_utc(entity.last_played_at),
        play_count=entity.play_count,
        craving_id=entity.craving_id,
    )


def to_entity(model: RecordingModel) -> RecordingEntity:
    return RecordingEntity(
        id=model.id,
        created_at=ensure_utc(model.created_at),
        recording_type=decode_recording_type(model.recording_type),
        purpose=decode_purpose(model.purpose),
        title=model.title,
        notes=model.notes,
        file_url=model.file_url,
        duration=model.duration if model.duration is not None else 0,
        thumbnail_url=model.thumbnail_url,
        last_played_at=ensure_utc(model.last_played_at),
        play_count=model.play_count or 0,
        craving_id=model.craving_id,
    )


def apply(entity: RecordingEntity, model: RecordingModel) -> None:
    """Overwrite every mutable field of an existing record from the entity."""
    model.created_at = ensure_utc(entity.created_at)
    model.recording_type = entity.recording_type.value
    model.purpose = entity.purpose.value
    model.title = entity.title
    model.notes = entity.notes
    model.file_url = entity.file_url
    model.duration = entity.duration
    model.thumbnail_url = entity.thumbnail_url
    model.last_played_at = ensure_utc(entity.last_played_at)
    model.play_count = entity.play_count
    model.craving_id = entity.craving_id
