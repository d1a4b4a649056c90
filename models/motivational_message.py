import uuid

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text, Uuid

from models import Base


class MotivationalMessageModel(Base):
    """Stored motivational message. `category` holds the raw enum value."""

    __tablename__ = "motivational_messages"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    created_at = Column(DateTime(timezone=True), nullable=False)
    category = Column(String(50), nullable=False, index=True)
    content = Column(Text, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    is_user_created = Column(Boolean, nullable=False, default=False)
    display_priority = Column(Integer, nullable=False, default=5)
    times_shown = Column(Integer, nullable=False, default=0)
    last_shown_at = Column(DateTime(timezone=True), nullable=True)
    was_helpful = Column(Boolean, nullable=True)

    def __repr__(self) -> str:
        return f"<MotivationalMessageModel(id={self.id}, category={self.category})>"
