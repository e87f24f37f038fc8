import enum
import uuid
from sqlalchemy import UUID, Column, DateTime, String, Text, func
from reachout.core.database import Base
from reachout.models.common import utcnow


class VolunteerUnit(str, enum.Enum):
    PRAYER = "Prayer Unit"
    KITCHEN = "Kitchen Unit"
    CHOIR = "Choir Unit"
    USHERING = "Ushering Unit"
    CHILDREN = "Children Unit"
    MEDIA = "Media Unit"
    WELFARE = "Welfare Unit"
    EVANGELISM = "Evangelism Unit"
    PROTOCOL = "Protocol Unit"
    TECHNICAL = "Technical Unit"
    MEDICAL = "Medical Unit"
    TRANSPORTATION = "Transportation Unit"
    MAINTENANCE = "Maintenance Unit"


class Volunteer(Base):
    __tablename__ = "volunteers"

    id = Column(UUID(as_uuid=True), primary_key=True, index=True, default=uuid.uuid4)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    # Stored as the unit's display name
    unit = Column(String, nullable=False)
    message = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now(), index=True)

    def __repr__(self):
        return f"<Volunteer {self.name} ({self.unit})>"
