"""
Crime code API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core.db import Database, get_db

from . import repository

router = APIRouter()


@router.get("/codes")
async def get_codes(db: Database = Depends(get_db)) -> dict:
    codes = await repository.list_codes(db)
    return {"codes": codes}
