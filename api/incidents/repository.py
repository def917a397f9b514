"""
Incident persistence.
This module is where incident-related SQL lives.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from core.db import Database

if TYPE_CHECKING:
    from .service import BoundingBox

VISIBLE_CRIMES_LIMIT = 1000

INSERT_INCIDENT_SQL = """
    INSERT INTO Incidents (case_number, date_time, code, incident, police_grid, neighborhood_number, block)
    VALUES (?, ?, ?, ?, ?, ?, ?)
"""


async def list_incidents(db: Database) -> list[dict]:
    return await db.fetch_all("SELECT * FROM Incidents")


async def insert_incident(
    db: Database,
    *,
    case_number: Any,
    date_time: Any,
    code: Any,
    incident: Any,
    police_grid: Any,
    neighborhood_number: Any,
    block: Any,
) -> None:
    """
    Insert one incident. A duplicate `case_number` fails with `StoreError`.
    """
    await db.execute(
        INSERT_INCIDENT_SQL,
        case_number,
        date_time,
        code,
        incident,
        police_grid,
        neighborhood_number,
        block,
    )


async def delete_incident(db: Database, case_number: Any) -> None:
    await db.execute("DELETE FROM Incidents WHERE case_number = ?", case_number)


async def list_incidents_in_box(db: Database, box: BoundingBox) -> list[dict]:
    """
    Newest incidents inside `box`, joined with their code and neighborhood names.
    """
    # Bind order follows the WHERE clause: latitude pair first, then longitude.
    return await db.fetch_all(
        f"""
        SELECT Incidents.case_number, Incidents.date_time, Codes.incident_type, Incidents.incident,
               Neighborhoods.neighborhood_name, Incidents.block
        FROM Incidents
        INNER JOIN Codes ON Incidents.code = Codes.code
        INNER JOIN Neighborhoods ON Incidents.neighborhood_number = Neighborhoods.neighborhood_number
        WHERE Incidents.latitude BETWEEN ? AND ?
          AND Incidents.longitude BETWEEN ? AND ?
        ORDER BY Incidents.date_time DESC
        LIMIT {VISIBLE_CRIMES_LIMIT}
        """,
        box.south,
        box.north,
        box.west,
        box.east,
    )
