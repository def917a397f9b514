"""
Incident API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from core.db import Database, get_db

from . import repository, schemas, service

router = APIRouter()


@router.get("/incidents")
async def get_incidents(db: Database = Depends(get_db)) -> dict:
    incidents = await repository.list_incidents(db)
    return {"incidents": incidents}


@router.put("/new-incident", response_class=PlainTextResponse)
async def new_incident(
    request: schemas.NewIncidentRequest,
    db: Database = Depends(get_db),
) -> str:
    await repository.insert_incident(db, **request.model_dump())
    return "OK"


@router.delete("/remove-incident", response_class=PlainTextResponse)
async def remove_incident(
    request: schemas.RemoveIncidentRequest,
    db: Database = Depends(get_db),
) -> str:
    # Zero matching rows is not an error.
    await repository.delete_incident(db, request.case_number)
    return "OK"


@router.get("/visible-crimes")
async def get_visible_crimes(
    bounds: str = Query(...),
    db: Database = Depends(get_db),
) -> dict:
    """
    Crimes inside the map viewport `bounds` ("south,west,north,east").
    """
    crimes = await service.visible_crimes(db, bounds)
    return {"crimes": crimes}
