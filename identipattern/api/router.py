"""Mounts the health and pattern routers under /api."""

from __future__ import annotations

from fastapi import APIRouter

from identipattern.api import health, pattern

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(pattern.router)
