from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from reachout.core.config import settings
from reachout.core.database import db
from reachout.core.timestamps import format_timestamp

router = APIRouter()


@router.get("/", status_code=status.HTTP_200_OK, summary="Health Check Endpoint")
async def health_check() -> Any:
    """
    Report whether the API can reach its store. Answers 503 when it cannot,
    so load balancers stop routing to the instance.
    """
    store_ok = await db.check_connection()
    body: Dict[str, Any] = {
        "status": "healthy" if store_ok else "degraded",
        "store": "reachable" if store_ok else "unreachable",
        "timestamp": format_timestamp(datetime.now(timezone.utc)),
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT,
    }
    if not store_ok:
        return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=body)
    return body
