from fastapi import APIRouter

from .routes import assignment, parts, tasks

api_router = APIRouter()
api_router.include_router(assignment.router, prefix="/assignment", tags=["assignment"])
api_router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
api_router.include_router(parts.router, prefix="/parts-requests", tags=["parts-requests"])
