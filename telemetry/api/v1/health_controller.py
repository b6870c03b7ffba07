# External package imports
from fastapi import APIRouter


router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict:
    """Liveness probe; does not touch storage"""
    return {"status": "ok"}
