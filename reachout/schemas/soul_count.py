from uuid import UUID
from pydantic import Field

from reachout.schemas.common import CamelModel, Timestamp


class SoulCountUpdate(CamelModel):
    count: int = Field(..., ge=0)


class SoulCountRead(CamelModel):
    id: UUID
    count: int
    last_updated: Timestamp
