from typing import Any
from fastapi import APIRouter, HTTPException, Request, status

from reachout.api.deps import DataClientDep
from reachout.schemas.common import APIResponse
from reachout.services.mapping import to_api
from reachout.services.public_pages import PrayerRequestController

router = APIRouter()


@router.post("", response_model=APIResponse, status_code=201)
async def submit_prayer_request(request: Request, client: DataClientDep) -> Any:
    controller = PrayerRequestController(client)
    form = await request.form()
    prayer_request = await controller.submit(form)
    notifications = controller.notifier.drain()

    if prayer_request is None:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY if controller.form_errors else status.HTTP_502_BAD_GATEWAY,
            detail={
                "message": notifications[-1].message,
                "notifications": [n.model_dump() for n in notifications],
                "errors": controller.form_errors,
            },
        )

    return APIResponse(
        message=notifications[-1].message,
        data=to_api(prayer_request),
        notifications=notifications,
    )
