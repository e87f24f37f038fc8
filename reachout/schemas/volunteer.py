from typing import Optional
from uuid import UUID
from pydantic import EmailStr

from reachout.models.volunteer import VolunteerUnit
from reachout.schemas.common import CamelModel, FormModel, NonBlank, OptionalText, Timestamp


class VolunteerForm(FormModel):
    name: NonBlank
    email: EmailStr
    phone: NonBlank
    unit: VolunteerUnit
    message: OptionalText = None


class VolunteerRead(CamelModel):
    id: UUID
    name: str
    email: str
    phone: str
    unit: str
    message: Optional[str] = None
    created_at: Optional[Timestamp] = None
