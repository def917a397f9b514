"""
Neighborhood lookups (raw SQL).
"""

from __future__ import annotations

from core.db import Database


async def list_neighborhoods(db: Database) -> list[dict]:
    return await db.fetch_all("SELECT * FROM Neighborhoods")
