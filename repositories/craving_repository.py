"""
Repository for craving persistence.

Translates between CravingEntity and CravingModel through craving_mapper and
runs every operation through the injected StorageContext.
"""

import logging
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from core.icraving_repository import ICravingRepository
from db import StorageContext
from entities.craving import CravingEntity
from exceptions.repository_error import NotFoundError
from mappers import craving_mapper
from models.craving import CravingModel
from models.recording import RecordingModel
from utils.date_util import ensure_utc

logger = logging.getLogger(__name__)


class CravingRepository(ICravingRepository):
    """Repository for craving CRUD operations."""

    def __init__(self, context: StorageContext):
        self.context = context

    def save(self, craving: CravingEntity) -> None:
        """
        Insert a new craving and commit.

        Raises:
            PersistenceError: If the commit fails (nothing is left half-written)
        """
        record = craving_mapper.to_model(craving)
        with self.context.transaction("save craving") as session:
            session.add(record)
        logger.debug(f"Saved craving {craving.id}")

    def fetch_all(self) -> List[CravingEntity]:
        with self.context.read("fetch cravings") as session:
            records = session.query(CravingModel).order_by(CravingModel.timestamp.desc()).all()
            return [craving_mapper.to_entity(record) for record in records]

    def fetch(self, start: datetime, end: datetime) -> List[CravingEntity]:
        """
        Get cravings in an inclusive time range.

        Args:
            start: Earliest timestamp to include
            end: Latest timestamp to include

        Returns:
            Matching cravings, newest first
        """
        with self.context.read("fetch cravings in range") as session:
            records = (
                session.query(CravingModel)
                .filter(CravingModel.timestamp >= ensure_utc(start))
                .filter(CravingModel.timestamp <= ensure_utc(end))
                .order_by(CravingModel.timestamp.desc())
                .all()
            )
            return [craving_mapper.to_entity(record) for record in records]

    def get(self, craving_id: UUID) -> Optional[CravingEntity]:
        with self.context.read("get craving") as session:
            record = session.query(CravingModel).filter_by(id=craving_id).first()
            if record is None:
                return None
            return craving_mapper.to_entity(record)

    def delete(self, craving_id: UUID) -> None:
        """
        Delete a craving together with the recordings it owns.

        Both deletes are committed as one unit. Unknown ids are a no-op.
        """
        with self.context.transaction("delete craving") as session:
            recordings_deleted = (
                session.query(RecordingModel)
                .filter(RecordingModel.craving_id == craving_id)
                .delete()
            )
            cravings_deleted = (
                session.query(CravingModel)
                .filter(CravingModel.id == craving_id)
                .delete()
            )
        logger.debug(
            f"Deleted {cravings_deleted} craving(s) and {recordings_deleted} recording(s) for {craving_id}"
        )

    def update(self, craving: CravingEntity) -> None:
        """
        Overwrite every mutable field of an existing craving.

        Raises:
            NotFoundError: If no craving has this id
            PersistenceError: If the commit fails
        """
        with self.context.transaction("update craving") as session:
            record = session.query(CravingModel).filter_by(id=craving.id).first()
            if record is None:
                raise NotFoundError("Craving", craving.id)
            craving_mapper.apply(craving, record)
        logger.debug(f"Updated craving {craving.id}")

    def count(self) -> int:
        with self.context.read("count cravings") as session:
            return session.query(CravingModel).count()
