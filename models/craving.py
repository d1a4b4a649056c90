"""
CravingModel - persistence record for a craving episode.

Mirrors CravingEntity field for field. Owns zero or more recordings; the
relationship cascades deletes, but CravingRepository also removes child
recordings explicitly so the behaviour doesn't depend on the engine
enforcing foreign keys.
"""

import uuid

from sqlalchemy import JSON, Boolean, Column, DateTime, Float, Integer, String, Text, Uuid
from sqlalchemy.orm import relationship

from models import Base


class CravingModel(Base):
    """Stored craving episode."""

    __tablename__ = "cravings"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    timestamp = Column(DateTime(timezone=True), nullable=False, index=True)
    intensity = Column(Integer, nullable=False)
    duration = Column(Float, nullable=True)
    triggers = Column(JSON, nullable=False, default=list)
    notes = Column(Text, nullable=True)
    location = Column(String(255), nullable=True)
    management_strategy = Column(String(255), nullable=True)
    was_managed_successfully = Column(Boolean, nullable=False, default=False)

    recordings = relationship(
        "RecordingModel",
        back_populates="craving",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<CravingModel(id={self.id}, timestamp={self.timestamp}, intensity={self.intensity})>"
