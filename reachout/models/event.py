import enum
import uuid
from sqlalchemy import UUID, Column, DateTime, Enum, String, Text
from reachout.core.database import Base


class EventType(str, enum.Enum):
    PAST = "past"
    CURRENT = "current"
    FUTURE = "future"


class Event(Base):
    __tablename__ = "events"

    id = Column(UUID(as_uuid=True), primary_key=True, index=True, default=uuid.uuid4)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    date = Column(DateTime(timezone=True), nullable=False, index=True)
    location = Column(String, nullable=False)
    image_url = Column(String, nullable=True)
    video_url = Column(String, nullable=True)
    type = Column(
        Enum(EventType, values_callable=lambda e: [member.value for member in e]),
        nullable=False,
        default=EventType.FUTURE.value,
    )

    def __repr__(self):
        return f"<Event {self.title}>"
