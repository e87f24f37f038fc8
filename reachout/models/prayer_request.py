import uuid
from sqlalchemy import UUID, Column, DateTime, String, Text, func
from reachout.core.database import Base
from reachout.models.common import utcnow


class PrayerRequest(Base):
    __tablename__ = "prayer_requests"

    id = Column(UUID(as_uuid=True), primary_key=True, index=True, default=uuid.uuid4)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    request = Column(Text, nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now(), index=True)
