from typing import Optional
from uuid import UUID

from reachout.models.event import EventType
from reachout.schemas.common import (
    CamelModel,
    FormModel,
    LocalDateTime,
    NonBlank,
    OptionalUrl,
    Timestamp,
)


class EventForm(FormModel):
    title: NonBlank
    description: NonBlank
    date: LocalDateTime
    location: NonBlank
    # blank inputs are stored as an explicit null
    image_url: OptionalUrl = None
    video_url: OptionalUrl = None
    type: EventType


class EventRead(CamelModel):
    id: UUID
    title: str
    description: str
    date: Timestamp
    location: str
    image_url: Optional[str] = None
    video_url: Optional[str] = None
    type: EventType
