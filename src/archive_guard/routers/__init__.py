from fastapi import APIRouter

from archive_guard.routers.archive_check import router as archive_check_router
from archive_guard.routers.games import router as games_router
from archive_guard.routers.mods import router as mods_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(games_router)
api_router.include_router(mods_router)
api_router.include_router(archive_check_router)
