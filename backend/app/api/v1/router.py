# backend/app/api/v1/router.py
from fastapi import APIRouter
from .endpoints import generate, analyze, templates, health

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(generate.router, prefix="/generate", tags=["generate"])
api_router.include_router(analyze.router, prefix="/analyze", tags=["analyze"])
api_router.include_router(templates.router, prefix="/templates", tags=["templates"])
