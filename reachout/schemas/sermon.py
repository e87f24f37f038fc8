from typing import Optional
from uuid import UUID

from reachout.schemas.common import (
    CamelModel,
    FormModel,
    LocalDateTime,
    NonBlank,
    OptionalUrl,
    RequiredUrl,
    Timestamp,
)


class SermonForm(FormModel):
    title: NonBlank
    speaker: NonBlank
    date: LocalDateTime
    duration: NonBlank
    description: str = ""
    video_url: RequiredUrl
    image_url: OptionalUrl = None


class SermonRead(CamelModel):
    id: UUID
    title: str
    speaker: str
    date: Timestamp
    duration: str
    description: str
    video_url: str
    image_url: Optional[str] = None
    created_at: Timestamp
