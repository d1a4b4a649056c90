"""
Composition root.

Builds the storage context, repositories and use cases once per process
and hands them out explicitly; nothing below this module reaches for a
global session or file manager.
"""

import logging
from datetime import timedelta
from pathlib import Path
from typing import Optional, Union

from db import DATABASE_URL, IN_MEMORY_URL, StorageContext, create_storage_context
from entities.craving import CravingEntity
from entities.recording import RecordingEntity, RecordingPurpose, RecordingType
from presentation.craving_log_view_model import CravingLogViewModel
from repositories.craving_repository import CravingRepository
from repositories.message_repository import MessageRepository
from repositories.recording_repository import RecordingRepository
from services.file_storage_service import FileStorageService
from use_cases.fetch_cravings_use_case import DefaultFetchCravingsUseCase
from use_cases.log_craving_use_case import DefaultLogCravingUseCase
from use_cases.record_playback_use_case import RecordPlaybackUseCase
from utils.config_service import Config
from utils.date_util import utc_now

logger = logging.getLogger(__name__)


class DependencyContainer:
    def __init__(
        self,
        database_url: Optional[str] = None,
        media_root: Optional[Union[str, Path]] = None,
        preview: bool = False,
    ):
        """
        Args:
            database_url: SQLAlchemy URL; defaults to CRAVEY_DATABASE_URL
            media_root: Root directory for recording files; defaults to config
            preview: Use an in-memory database seeded with sample data
        """
        self.preview = preview
        url = IN_MEMORY_URL if preview else (database_url or DATABASE_URL)

        # Infrastructure
        self.context: StorageContext = create_storage_context(url)
        self.file_storage = FileStorageService(media_root or Config.media_root())

        # Repositories
        self.craving_repository = CravingRepository(self.context)
        self.recording_repository = RecordingRepository(self.context)
        self.message_repository = MessageRepository(self.context)

        # Use cases
        self.log_craving_use_case = DefaultLogCravingUseCase(self.craving_repository)
        self.fetch_cravings_use_case = DefaultFetchCravingsUseCase(self.craving_repository)
        self.record_playback_use_case = RecordPlaybackUseCase(self.recording_repository)

        if preview:
            self._seed_preview_data()
        elif Config.seed_default_messages():
            self.message_repository.seed_default_messages_if_needed()

        logger.info(f"DependencyContainer ready (preview={preview})")

    def make_craving_log_view_model(self) -> CravingLogViewModel:
        return CravingLogViewModel(self.log_craving_use_case)

    def _seed_preview_data(self) -> None:
        self.craving_repository.save(CravingEntity(
            timestamp=utc_now() - timedelta(hours=1),
            intensity=7,
            triggers=["Anxious", "Bored"],
            notes="Had a rough meeting",
            was_managed_successfully=True,
        ))
        self.recording_repository.save(RecordingEntity(
            recording_type=RecordingType.AUDIO,
            purpose=RecordingPurpose.MOTIVATIONAL,
            title="Remember Why You Started",
            file_url="Recordings/sample.m4a",
            duration=120,
            notes="Recorded after 1 week clean",
        ))
        self.message_repository.seed_default_messages_if_needed()

    def close(self) -> None:
        self.context.close()
