import logging
from typing import Any
from fastapi import APIRouter, HTTPException, Request, status

from reachout.api.deps import DataClientDep
from reachout.schemas.common import APIResponse
from reachout.services.mapping import to_api
from reachout.services.public_pages import GetInvolvedController

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=APIResponse)
async def read_get_involved(client: DataClientDep) -> Any:
    """Units a volunteer can join and the donation account details."""
    page = GetInvolvedController(client)
    return APIResponse(
        message="Get involved",
        data={"units": page.units, "donation": page.donation_details},
    )


@router.post("/volunteers", response_model=APIResponse, status_code=201)
async def submit_volunteer(request: Request, client: DataClientDep) -> Any:
    """
    Submit a volunteer application. On failure the submitted values are
    echoed back so the form can be sent again unchanged.
    """
    page = GetInvolvedController(client)
    form = await request.form()
    volunteer = await page.submit_volunteer(form)
    notifications = page.notifier.drain()

    if volunteer is None:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY if page.form_errors else status.HTTP_502_BAD_GATEWAY,
            detail={
                "message": notifications[-1].message,
                "notifications": [n.model_dump() for n in notifications],
                "errors": page.form_errors,
                "values": {key: value for key, value in page.form_values.items() if isinstance(value, str)},
            },
        )

    return APIResponse(
        message=notifications[-1].message,
        data={"volunteer": to_api(volunteer), "values": page.form_values},
        notifications=notifications,
    )


@router.post("/donate", response_model=APIResponse)
async def donate_online(client: DataClientDep) -> Any:
    """Online giving is not wired to a payment gateway yet."""
    page = GetInvolvedController(client)
    page.donate_online()
    notifications = page.notifier.drain()
    raise HTTPException(
        status_code=status.HTTP_501_NOT_IMPLEMENTED,
        detail={
            "message": notifications[-1].message,
            "notifications": [n.model_dump() for n in notifications],
            "donation": page.donation_details,
        },
    )
