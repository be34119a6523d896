"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from shapefinder.api import analyze, groupings, health

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(groupings.router)
api_router.include_router(analyze.router)
