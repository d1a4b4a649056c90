"""
Mapper between CravingEntity (domain) and CravingModel (persistence).

Pure functions: no validation, no I/O, no session access.
"""

from entities.craving import CravingEntity
from models.craving import CravingModel
from utils.date_util import ensure_utc


def to_model(entity: CravingEntity) -> CravingModel:
    """Convert a domain entity to a new, unattached persistence record."""
    return CravingModel(
        id=entity.id,
        timestamp=ensure_utc(entity.timestamp),
        intensity=entity.intensity,
        duration=entity.duration,
        triggers=list(entity.triggers),
        notes=entity.notes,
        location=entity.location,
        management_strategy=entity.management_strategy,
        was_managed_successfully=entity.was_managed_successfully,
    )


def to_entity(model: CravingModel) -> CravingEntity:
    """Convert a persistence record to a domain entity."""
    return CravingEntity(
        id=model.id,
        timestamp=ensure_utc(model.timestamp),
        intensity=model.intensity,
        duration=model.duration,
        triggers=tuple(model.triggers or ()),
        notes=model.notes,
        location=model.location,
        management_strategy=model.management_strategy,
        was_managed_successfully=bool(model.was_managed_successfully),
    )


def apply(entity: CravingEntity, model: CravingModel) -> None:
    """Overwrite every mutable field of an existing record from the entity."""
    model.timestamp = ensure_utc(entity.timestamp)
    model.intensity = entity.intensity
    model.duration = entity.duration
    model.triggers = list(entity.triggers)
    model.notes = entity.notes
    model.location = entity.location
    model.management_strategy = entity.management_strategy
    model.was_managed_successfully = entity.was_managed_successfully
