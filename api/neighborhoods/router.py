"""
Neighborhood API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core.db import Database, get_db

from . import repository

router = APIRouter()


@router.get("/neighborhoods")
async def get_neighborhoods(db: Database = Depends(get_db)) -> dict:
    neighborhoods = await repository.list_neighborhoods(db)
    return {"neighborhoods": neighborhoods}
