import uuid

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import relationship

from models import Base


class RecordingModel(Base):
    """Stored audio/video recording. Enum fields hold their raw string values."""

    __tablename__ = "recordings"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    created_at = Column(DateTime(timezone=True), nullable=False, index=True)
    recording_type = Column(String(50), nullable=False)
    purpose = Column(String(50), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    notes = Column(Text, nullable=True)
    file_url = Column(String(1024), nullable=False)
    duration = Column(Float, nullable=False, default=0)
    thumbnail_url = Column(String(1024), nullable=True)
    last_played_at = Column(DateTime(timezone=True), nullable=True)
    play_count = Column(Integer, nullable=False, default=0)
    craving_id = Column(
        Uuid,
        ForeignKey("cravings.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )

    craving = relationship("CravingModel", back_populates="recordings")

    def __repr__(self) -> str:
        return f"<RecordingModel(id={self.id}, title={self.title}, purpose={self.purpose})>"
