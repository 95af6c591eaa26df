from fastapi import APIRouter

from app.api import auth, games, system, tags

api_router = APIRouter()
api_router.include_router(system.router)
api_router.include_router(auth.router)
api_router.include_router(games.router)
api_router.include_router(tags.router)
