"""
File storage for recording media.

Recordings are copied under <root>/Recordings and referenced by paths
relative to the root, so the stored paths stay valid if the root moves.
"""

import logging
import os
import shutil
import uuid
from pathlib import Path
from typing import Optional, Union

from entities.recording import RecordingType
from exceptions.storage_error import StorageError

logger = logging.getLogger(__name__)

RECORDINGS_DIR = "Recordings"
THUMBNAILS_DIR = "Thumbnails"


class FileStorageService:
    """Saves, resolves and deletes recording files under one media root."""

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root)

    @property
    def recordings_directory(self) -> Path:
        return self._ensure_directory(self.root / RECORDINGS_DIR)

    @property
    def thumbnails_directory(self) -> Path:
        return self._ensure_directory(self.root / RECORDINGS_DIR / THUMBNAILS_DIR)

    @staticmethod
    def _ensure_directory(path: Path) -> Path:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError("Failed to create storage directory", str(path)) from e
        return path

    def save_recording(self, temp_path: Union[str, Path], recording_type: RecordingType) -> str:
        """
        Copy a captured file into storage.

        Args:
            temp_path: Location of the captured file
            recording_type: Decides the stored file extension

        Returns:
            Path relative to the media root (e.g. "Recordings/<uuid>.m4a")
        """
        filename = f"{uuid.uuid4()}.{recording_type.file_extension}"
        destination = self.recordings_directory / filename

        try:
            shutil.copyfile(temp_path, destination)
        except OSError as e:
            logger.error(f"Failed to save recording from {temp_path}: {e}")
            raise StorageError("Failed to save file", str(temp_path)) from e

        relative_path = f"{RECORDINGS_DIR}/{filename}"
        logger.debug(f"Saved recording to {relative_path}")
        return relative_path

    def absolute_path(self, relative_path: str) -> Path:
        return self.root / relative_path

    def delete_recording(self, relative_path: str) -> None:
        """
        Raises:
            StorageError: If the file doesn't exist or can't be removed
        """
        path = self.absolute_path(relative_path)
        if not path.exists():
            raise StorageError("File not found", relative_path)
        try:
            path.unlink()
        except OSError as e:
            raise StorageError("Failed to delete file", relative_path) from e

    def delete_thumbnail(self, relative_path: Optional[str]) -> None:
        # Missing thumbnails are fine; not every recording has one
        if not relative_path:
            return
        path = self.absolute_path(relative_path)
        if not path.exists():
            return
        try:
            path.unlink()
        except OSError as e:
            raise StorageError("Failed to delete thumbnail", relative_path) from e

    def total_storage_used(self) -> int:
        """Total size in bytes of every file under the recordings directory."""
        total = 0
        # A missing directory counts as empty; nothing is created here
        for dirpath, _, filenames in os.walk(self.root / RECORDINGS_DIR):
            for name in filenames:
                total += os.path.getsize(os.path.join(dirpath, name))
        return total

    @staticmethod
    def format_bytes(size: int) -> str:
        if size < 1024:
            return f"{size} bytes"
        value = float(size)
        for unit in ("KB", "MB"):
            value /= 1024
            if value < 1024:
                return f"{value:.1f} {unit}"
        return f"{value / 1024:.1f} GB"
