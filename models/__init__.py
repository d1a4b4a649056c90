from sqlalchemy.orm import declarative_base

Base = declarative_base()

from .craving import CravingModel  # noqa: E402
from .motivational_message import MotivationalMessageModel  # noqa: E402
from .recording import RecordingModel  # noqa: E402

__all__ = ["Base", "CravingModel", "MotivationalMessageModel", "RecordingModel"]
