import uuid
from sqlalchemy import UUID, Column, DateTime, Integer, func
from reachout.core.database import Base
from reachout.models.common import utcnow


class SoulCount(Base):
    """Singleton aggregate: the site only ever reads the first row."""
    __tablename__ = "soul_count"

    id = Column(UUID(as_uuid=True), primary_key=True, index=True, default=uuid.uuid4)
    count = Column(Integer, nullable=False, default=0)
    last_updated = Column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now(),
        onupdate=utcnow
    )
