from fastapi import APIRouter
from reachout.api.v1.routes import auth, health, dashboard
from reachout.api.v1.routes import home, get_involved, resources, prayer_requests


api_router = APIRouter()
api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["authentication"])

api_router.include_router(dashboard.router, prefix="/admin", tags=["admin dashboard"])

api_router.include_router(home.router, prefix="/home", tags=["home"])
api_router.include_router(get_involved.router, prefix="/get-involved", tags=["get involved"])
api_router.include_router(resources.router, prefix="/resources", tags=["resources"])
api_router.include_router(resources.events_router, prefix="/events", tags=["events"])
api_router.include_router(prayer_requests.router, prefix="/prayer-requests", tags=["prayer requests"])
