import uuid
from sqlalchemy import UUID, Column, DateTime, String, Text, func
from reachout.core.database import Base
from reachout.models.common import utcnow


class Sermon(Base):
    __tablename__ = "sermons"

    id = Column(UUID(as_uuid=True), primary_key=True, index=True, default=uuid.uuid4)
    title = Column(String, nullable=False)
    speaker = Column(String, nullable=False)
    date = Column(DateTime(timezone=True), nullable=False, index=True)
    duration = Column(String, nullable=False)
    description = Column(Text, nullable=False, default="")
    video_url = Column(String, nullable=False)
    image_url = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now())

    def __repr__(self):
        return f"<Sermon {self.title} - {self.speaker}>"
