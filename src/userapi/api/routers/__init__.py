"""API routers package."""

from fastapi import APIRouter

from src.userapi.api.routers.users import router as users_router

api_router = APIRouter()

# User management router
api_router.include_router(users_router)
