import logging
from typing import Any, Dict, List, NoReturn
from uuid import UUID

from fastapi import APIRouter, HTTPException, Query, Request, status

from reachout.api.deps import DashboardDep
from reachout.schemas.common import APIResponse
from reachout.schemas.soul_count import SoulCountUpdate
from reachout.services.dashboard import AdminDashboardController, ManagedEntity
from reachout.services.mapping import to_api, to_api_list

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

router = APIRouter()


def respond(dashboard: AdminDashboardController, message: str, data: Any = None) -> APIResponse:
    return APIResponse(message=message, data=data, notifications=dashboard.notifier.drain())


def fail(dashboard: AdminDashboardController, status_code: int, fallback: str, **extra: Any) -> NoReturn:
    notifications = dashboard.notifier.drain()
    detail: Dict[str, Any] = {
        "message": notifications[-1].message if notifications else fallback,
        "notifications": [n.model_dump() for n in notifications],
    }
    detail.update(extra)
    raise HTTPException(status_code=status_code, detail=detail)


def all_lists(dashboard: AdminDashboardController) -> Dict[str, Any]:
    return {
        "loading": dashboard.loading,
        "events": to_api_list(dashboard.events),
        "sermons": to_api_list(dashboard.sermons),
        "documents": to_api_list(dashboard.documents),
    }


@router.get("/dashboard", response_model=APIResponse)
async def read_dashboard(dashboard: DashboardDep) -> Any:
    """
    Load events, sermons and documents at once. A collection that fails to
    load is reported in the notifications and comes back empty.
    """
    await dashboard.load_all()
    return respond(dashboard, "Dashboard loaded", all_lists(dashboard))


@router.get("/volunteers", response_model=APIResponse)
async def read_volunteers(dashboard: DashboardDep) -> Any:
    """Volunteer applications received from the get-involved page, newest first."""
    volunteers = await dashboard.load_volunteers()
    if volunteers is None:
        fail(dashboard, status.HTTP_502_BAD_GATEWAY, "Error loading volunteers")
    return respond(dashboard, f"Retrieved {len(volunteers)} volunteers", to_api_list(volunteers))


@router.get("/prayer-requests", response_model=APIResponse)
async def read_prayer_requests(dashboard: DashboardDep) -> Any:
    requests = await dashboard.load_prayer_requests()
    if requests is None:
        fail(dashboard, status.HTTP_502_BAD_GATEWAY, "Error loading prayer requests")
    return respond(dashboard, f"Retrieved {len(requests)} prayer requests", to_api_list(requests))


@router.put("/soul-count", response_model=APIResponse)
async def update_soul_count(dashboard: DashboardDep, soul_count: SoulCountUpdate) -> Any:
    """Set the souls-won aggregate shown on the home page."""
    saved = await dashboard.set_soul_count(soul_count.count)
    if saved is None:
        fail(dashboard, status.HTTP_502_BAD_GATEWAY, "Error saving soul count")
    return respond(dashboard, "Soul count updated successfully", to_api(saved))


@router.get("/{entity}", response_model=APIResponse)
async def read_entities(entity: ManagedEntity, dashboard: DashboardDep) -> Any:
    if not await dashboard.refresh(entity):
        fail(dashboard, status.HTTP_502_BAD_GATEWAY, f"Error loading {entity.value}")
    records: List[Any] = dashboard.records[entity]
    return respond(dashboard, f"Retrieved {len(records)} {entity.value}", to_api_list(records))


@router.get("/{entity}/form", response_model=APIResponse)
async def read_create_form(entity: ManagedEntity, dashboard: DashboardDep) -> Any:
    """Starting values for the 'add new' modal."""
    dashboard.open_create(entity)
    return respond(dashboard, f"Add new {entity.config.name}", {
        "mode": "create",
        "values": dashboard.form_defaults(entity),
    })


@router.get("/{entity}/{record_id}/form", response_model=APIResponse)
async def read_edit_form(entity: ManagedEntity, record_id: UUID, dashboard: DashboardDep) -> Any:
    """Starting values for the edit modal: the record's current values."""
    record = await dashboard.find(entity, record_id)
    if record is None:
        fail(dashboard, status.HTTP_404_NOT_FOUND, f"{entity.config.label} not found")
    dashboard.begin_edit(entity, record)
    return respond(dashboard, f"Edit {entity.config.name}", {
        "mode": "edit",
        "id": str(record.id),
        "values": dashboard.form_defaults(entity),
    })


async def submit_form(entity: ManagedEntity, request: Request, dashboard: AdminDashboardController) -> APIResponse:
    form = await request.form()
    if not await dashboard.submit(entity, form):
        if dashboard.form_errors[entity]:
            fail(
                dashboard,
                status.HTTP_422_UNPROCESSABLE_ENTITY,
                "Validation Error",
                errors=dashboard.form_errors[entity],
            )
        fail(dashboard, status.HTTP_502_BAD_GATEWAY, f"Error saving {entity.config.name}")
    return respond(
        dashboard,
        dashboard.notifier.last.message if dashboard.notifier.last else "Saved",
        to_api_list(dashboard.records[entity]),
    )


@router.post("/{entity}", response_model=APIResponse, status_code=201)
async def create_entity(entity: ManagedEntity, request: Request, dashboard: DashboardDep) -> Any:
    """
    Create a record from the modal's form fields. Dates are local
    ``YYYY-MM-DDTHH:MM`` values. Returns the refreshed list.
    """
    dashboard.open_create(entity)
    return await submit_form(entity, request, dashboard)


@router.post("/{entity}/{record_id}", response_model=APIResponse)
async def update_entity(entity: ManagedEntity, record_id: UUID, request: Request, dashboard: DashboardDep) -> Any:
    """
    Replace a record with the submitted form fields. Returns the refreshed list.
    """
    record = await dashboard.find(entity, record_id)
    if record is None:
        fail(dashboard, status.HTTP_404_NOT_FOUND, f"{entity.config.label} not found")
    dashboard.begin_edit(entity, record)
    return await submit_form(entity, request, dashboard)


@router.delete("/{entity}/{record_id}", response_model=APIResponse)
async def delete_entity(
    entity: ManagedEntity,
    record_id: UUID,
    dashboard: DashboardDep,
    confirm: bool = Query(False, description="Must be true; deleting is only done on explicit confirmation"),
) -> Any:
    """
    Delete a record once the operator has confirmed. Returns every list,
    refreshed from the store.
    """
    record = await dashboard.find(entity, record_id)
    if record is None:
        fail(dashboard, status.HTTP_404_NOT_FOUND, f"{entity.config.label} not found")

    prompts: List[str] = []

    def ask(prompt: str) -> bool:
        prompts.append(prompt)
        return confirm

    if not await dashboard.delete(entity, record.id, ask):
        if not confirm:
            fail(dashboard, status.HTTP_409_CONFLICT, prompts[0] if prompts else "Deletion not confirmed")
        fail(dashboard, status.HTTP_502_BAD_GATEWAY, f"Error deleting {entity.config.name}")
    return respond(dashboard, f"{entity.config.label} deleted successfully", all_lists(dashboard))
