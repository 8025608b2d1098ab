"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from chordview.api import diagram, export, health, interaction, relationships

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(relationships.router)
api_router.include_router(diagram.router)
api_router.include_router(interaction.router)
api_router.include_router(export.router)
