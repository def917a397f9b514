"""
FastAPI router for ingestion endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from core.db import Database, get_db
from core.feed import CrimeFeed, get_feed

from . import service

router = APIRouter()


@router.get("/populate-crimes", response_class=PlainTextResponse)
async def populate_crimes(
    db: Database = Depends(get_db),
    feed: CrimeFeed = Depends(get_feed),
) -> str:
    """
    Fetch the most recent crimes from the upstream feed and store them.
    """
    await service.populate_crimes(db, feed)
    return "Crimes populated successfully"
