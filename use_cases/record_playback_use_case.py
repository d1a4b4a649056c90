"""Use case: register one playback of a recording."""

import logging
from uuid import UUID

from core.irecording_repository import IRecordingRepository
from entities.recording import RecordingEntity
from exceptions.repository_error import NotFoundError

logger = logging.getLogger(__name__)


class RecordPlaybackUseCase:
    def __init__(self, repository: IRecordingRepository):
        self.repository = repository

    def execute(self, recording_id: UUID) -> RecordingEntity:
        """
        Increment the play count and stamp last_played_at.

        Raises:
            NotFoundError: If the recording doesn't exist
        """
        recording = self.repository.get(recording_id)
        if recording is None:
            raise NotFoundError("Recording", recording_id)

        played = recording.increment_play_count()
        self.repository.update(played)
        logger.debug(f"Recording {recording_id} played {played.play_count} time(s)")
        return played
