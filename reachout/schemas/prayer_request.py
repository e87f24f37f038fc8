from uuid import UUID
from pydantic import EmailStr

from reachout.schemas.common import CamelModel, FormModel, NonBlank, Timestamp


class PrayerRequestForm(FormModel):
    name: NonBlank
    email: EmailStr
    request: NonBlank


class PrayerRequestRead(CamelModel):
    id: UUID
    name: str
    email: str
    request: str
    created_at: Timestamp
