"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from app.api.routes import auth, projects, tasks, materials, notes, tools

api_router = APIRouter()

# Include all route modules
api_router.include_router(auth.router)
api_router.include_router(projects.router)
api_router.include_router(tasks.router)
api_router.include_router(materials.router)
api_router.include_router(notes.router)
api_router.include_router(tools.router)
