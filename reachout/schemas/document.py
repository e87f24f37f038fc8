from typing import Optional
from uuid import UUID

from reachout.schemas.common import (
    CamelModel,
    FormModel,
    NonBlank,
    OptionalUrl,
    RequiredUrl,
    Timestamp,
)


class DocumentForm(FormModel):
    title: NonBlank
    description: NonBlank
    file_url: RequiredUrl
    # free-text display values such as "PDF" / "1.2 MB"
    file_type: NonBlank
    file_size: NonBlank
    image_url: OptionalUrl = None


class DocumentRead(CamelModel):
    id: UUID
    title: str
    description: str
    file_url: str
    file_type: str
    file_size: str
    image_url: Optional[str] = None
    created_at: Timestamp
