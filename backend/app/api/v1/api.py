"""API v1 — aggregates all routers under a single prefix."""

from fastapi import APIRouter

from app.api.v1.routers import generate

router = APIRouter()
router.include_router(generate.router)
