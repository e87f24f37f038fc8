from typing import Any, Optional
from fastapi import APIRouter, Query

from reachout.api.deps import DataClientDep
from reachout.models.event import EventType
from reachout.schemas.common import APIResponse
from reachout.services.mapping import to_api_list
from reachout.services.public_pages import ResourcesController

router = APIRouter()
events_router = APIRouter()


@router.get("/sermons", response_model=APIResponse)
async def read_sermons(client: DataClientDep) -> Any:
    """Sermons, latest first."""
    resources = ResourcesController(client)
    sermons = await resources.sermons()
    return APIResponse(
        message=f"Retrieved {len(sermons)} sermons",
        data=to_api_list(sermons),
        notifications=resources.notifier.drain(),
    )


@router.get("/documents", response_model=APIResponse)
async def read_documents(client: DataClientDep) -> Any:
    """Downloadable documents, most recently added first."""
    resources = ResourcesController(client)
    documents = await resources.documents()
    return APIResponse(
        message=f"Retrieved {len(documents)} documents",
        data=to_api_list(documents),
        notifications=resources.notifier.drain(),
    )


@events_router.get("", response_model=APIResponse)
async def read_events(
    client: DataClientDep,
    type: Optional[EventType] = Query(None, description="Only past, current or future events"),
) -> Any:
    resources = ResourcesController(client)
    events = await resources.events(type)
    return APIResponse(
        message=f"Retrieved {len(events)} events",
        data=to_api_list(events),
        notifications=resources.notifier.drain(),
    )
