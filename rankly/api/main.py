from fastapi import APIRouter

from .endpoints.actions import router as actions_router
from .endpoints.health import router as health_router
from .endpoints.profiles import router as profiles_router

api_router = APIRouter()


@api_router.get("/")
async def root():
    return {"message": "Rankly API is running"}


api_router.include_router(health_router)
api_router.include_router(actions_router)
api_router.include_router(profiles_router)
