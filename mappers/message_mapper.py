"""Mapper between MotivationalMessageEntity and MotivationalMessageModel."""

from entities.motivational_message import MessageCategory, MotivationalMessageEntity
from models.motivational_message import MotivationalMessageModel
from utils.date_util import ensure_utc


def decode_category(raw: str) -> MessageCategory:
    # Unknown categories are treated as the user's own reasons
    try:
        return MessageCategory(raw)
    except ValueError:
        return MessageCategory.PERSONAL_REASON


def to_model(entity: MotivationalMessageEntity) -> MotivationalMessageModel:
    return MotivationalMessageModel(
        id=entity.id,
        created_at=ensure_utc(entity.created_at),
        category=entity.category.value,
        content=entity.content,
        is_active=entity.is_active,
        is_user_created=entity.is_user_created,
        display_priority=entity.display_priority,
        times_shown=entity.times_shown,
        last_shown_at=ensure_utc(entity.last_shown_at),
        was_helpful=entity.was_helpful,
    )


def to_entity(model: MotivationalMessageModel) -> MotivationalMessageEntity:
    return MotivationalMessageEntity(
        id=model.id,
        created_at=ensure_utc(model.created_at),
        category=decode_category(model.category),
        content=model.content,
        is_active=bool(model.is_active),
        is_user_created=bool(model.is_user_created),
        display_priority=model.display_priority,
        times_shown=model.times_shown or 0,
        last_shown_at=ensure_utc(model.last_shown_at),
        was_helpful=model.was_helpful,
    )


def apply(entity: MotivationalMessageEntity, model: MotivationalMessageModel) -> None:
    """Overwrite every mutable field of an existing record from the entity."""
    model.created_at = ensure_utc(entity.created_at)
    model.category = entity.category.value
    model.content = entity.content
    model.is_active = entity.is_active
    model.is_user_created = entity.is_user_created
    model.display_priority = entity.display_priority
    model.times_shown = entity.times_shown
    model.last_shown_at = ensure_utc(entity.last_shown_at)
    model.was_helpful = entity.was_helpful
