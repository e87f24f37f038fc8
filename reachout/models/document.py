import uuid
from sqlalchemy import UUID, Column, DateTime, String, Text, func
from reachout.core.database import Base
from reachout.models.common import utcnow


class Document(Base):
    __tablename__ = "documents"

    id = Column(UUID(as_uuid=True), primary_key=True, index=True, default=uuid.uuid4)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False, default="")
    file_url = Column(String, nullable=False)
    # Display strings, e.g. "PDF" and "2.4 MB"
    file_type = Column(String, nullable=False)
    file_size = Column(String, nullable=False)
    image_url = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now(), index=True)

    def __repr__(self):
        return f"<Document {self.title}>"
