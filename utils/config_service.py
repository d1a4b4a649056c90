import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_MEDIA_ROOT = "./media"
DEFAULT_LOG_LEVEL = "INFO"

FALSE_STRINGS = ('false', '0', 'no', 'off')


class Config:
    """Settings read from the JSON file named by CRAVEY_CONFIG_PATH.

    The file is re-read on every lookup so edits apply without a restart.
    A missing or unreadable file means every key falls back to its default.
    """
    _config_json: Optional[Dict[str, Any]] = None

    @staticmethod
    def _load_config() -> None:
        raw_path: str = os.environ.get('CRAVEY_CONFIG_PATH', '')
        if not raw_path:
            Config._config_json = None
            return
        config_path = os.path.expandvars(os.path.expanduser(raw_path))
        try:
            with open(config_path) as f:
                Config._config_json = json.load(f)
        except (FileNotFoundError, json.JSONDecodeError) as e:
            logger.warning(f"Error loading config from {config_path}: {e}")
            Config._config_json = None

    @staticmethod
    def _raw(key: str) -> Any:
        Config._load_config()
        if Config._config_json is None:
            return None
        return Config._config_json.get(key)

    @staticmethod
    def get_str(key: str, default: Optional[str] = None) -> Optional[str]:
        value = Config._raw(key)
        return default if value is None else str(value)

    @staticmethod
    def get_int(key: str, default: int) -> int:
        try:
            return int(Config._raw(key))
        except (ValueError, TypeError):
            return default

    @staticmethod
    def get_float(key: str, default: float) -> float:
        try:
            return float(Config._raw(key))
        except (ValueError, TypeError):
            return default

    @staticmethod
    def get_bool(key: str, default: Optional[bool] = None) -> Optional[bool]:
        value = Config._raw(key)
        if value is None:
            return default
        if isinstance(value, str):
            # "" and the usual spellings of "no" are false
            return bool(value) and value.lower() not in FALSE_STRINGS
        return bool(value)

    @staticmethod
    def media_root() -> str:
        """Directory that relative recording paths resolve against"""
        root = Config.get_str("media_root") or DEFAULT_MEDIA_ROOT
        return os.path.expandvars(os.path.expanduser(root))

    @staticmethod
    def log_level() -> str:
        return (Config.get_str("log_level") or DEFAULT_LOG_LEVEL).upper()

    @staticmethod
    def seed_default_messages() -> bool:
        return bool(Config.get_bool("seed_default_messages", True))
