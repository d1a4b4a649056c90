"""
Repository for recording persistence.

Only the recording metadata lives here; the media files are managed by
FileStorageService.
"""

import logging
from typing import List, Optional
from uuid import UUID

from core.irecording_repository import IRecordingRepository
from db import StorageContext
from entities.recording import RecordingEntity, RecordingPurpose
from exceptions.repository_error import NotFoundError
from mappers import recording_mapper
from models.recording import RecordingModel

logger = logging.getLogger(__name__)


class RecordingRepository(IRecordingRepository):
    """Repository for recording CRUD operations."""

    def __init__(self, context: StorageContext):
        self.context = context

    def save(self, recording: RecordingEntity) -> None:
        record = recording_mapper.to_model(recording)
        with self.context.transaction("save recording") as session:
            session.add(record)
        logger.debug(f"Saved recording {recording.id} ({recording.file_url})")

    def fetch_all(self) -> List[RecordingEntity]:
        with self.context.read("fetch recordings") as session:
            records = session.query(RecordingModel).order_by(RecordingModel.created_at.desc()).all()
            return [recording_mapper.to_entity(record) for record in records]

    def fetch_by_purpose(self, purpose: RecordingPurpose) -> List[RecordingEntity]:
        with self.context.read("fetch recordings by purpose") as session:
            records = (
                session.query(RecordingModel)
                .filter_by(purpose=purpose.value)
                .order_by(RecordingModel.created_at.desc())
                .all()
            )
            return [recording_mapper.to_entity(record) for record in records]

    def fetch_by_craving(self, craving_id: UUID) -> List[RecordingEntity]:
        """Recordings attached to one craving, newest first."""
        with self.context.read("fetch recordings by craving") as session:
            records = (
                session.query(RecordingModel)
                .filter_by(craving_id=craving_id)
                .order_by(RecordingModel.created_at.desc())
                .all()
            )
            return [recording_mapper.to_entity(record) for record in records]

    def get(self, recording_id: UUID) -> Optional[RecordingEntity]:
        with self.context.read("get recording") as session:
            record = session.query(RecordingModel).filter_by(id=recording_id).first()
            if record is None:
                return None
            return recording_mapper.to_entity(record)

    def delete(self, recording_id: UUID) -> None:
        with self.context.transaction("delete recording") as session:
            deleted = session.query(RecordingModel).filter(RecordingModel.id == recording_id).delete()
        logger.debug(f"Deleted {deleted} recording(s) for {recording_id}")

    def update(self, recording: RecordingEntity) -> None:
        """
        Overwrite every mutable field of an existing recording.

        Raises:
            NotFoundError: If no recording has this id
        """
        with self.context.transaction("update recording") as session:
            record = session.query(RecordingModel).filter_by(id=recording.id).first()
            if record is None:
                raise NotFoundError("Recording", recording.id)
            recording_mapper.apply(recording, record)

    def count(self) -> int:
        with self.context.read("count recordings") as session:
            return session.query(RecordingModel).count()
