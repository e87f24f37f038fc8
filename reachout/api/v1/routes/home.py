from typing import Any
from fastapi import APIRouter

from reachout.api.deps import DataClientDep
from reachout.schemas.common import APIResponse
from reachout.services.public_pages import HomeController

router = APIRouter()


@router.get("", response_model=APIResponse)
async def read_home(client: DataClientDep) -> Any:
    """
    Home page data. The soul count falls back to 0 when it has never been
    set or cannot be read.
    """
    home = HomeController(client)
    soul_count = await home.load()
    return APIResponse(message="Home", data={"soulCount": soul_count})
