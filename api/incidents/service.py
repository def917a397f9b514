"""
Incident query logic that is independent of FastAPI's routing layer.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.db import Database
from core.errors import InputError

from . import repository


@dataclass(frozen=True)
class BoundingBox:
    south: float
    west: float
    north: float
    east: float


def parse_bounds(raw: str) -> BoundingBox:
    """
    Parse a "south,west,north,east" string into a `BoundingBox`.

    There is no range check and values past the fourth are ignored; fewer
    than four values or a non-numeric one fails.
    """
    try:
        south, west, north, east = (float(part) for part in raw.split(",")[:4])
    except ValueError as exc:
        raise InputError(f"Malformed bounds {raw!r}: {exc}") from exc
    return BoundingBox(south=south, west=west, north=north, east=east)


async def visible_crimes(db: Database, bounds: str) -> list[dict]:
    return await repository.list_incidents_in_box(db, parse_bounds(bounds))
