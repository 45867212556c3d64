"""Liveness endpoint."""

from typing import Dict

from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
async def health() -> Dict[str, bool]:
    return {"ok": True}
