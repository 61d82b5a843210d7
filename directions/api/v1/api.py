from fastapi import APIRouter

from directions.api.v1.endpoints import directions, health

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(directions.router, prefix="/directions", tags=["directions"])
