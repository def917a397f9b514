"""
Bulk ingest from the upstream crime feed.

Records are inserted one at a time, each committed on its own. A failing
record aborts the run and leaves every earlier insert in place.
"""

from __future__ import annotations

import logging
from typing import Any

from core.db import Database
from core.feed import CrimeFeed, FeedError
from incidents import repository as incident_repository

MAX_POPULATE_RECORDS = 1000

INCIDENT_FIELDS = (
    "case_number",
    "date_time",
    "code",
    "incident",
    "police_grid",
    "neighborhood_number",
    "block",
)

logger = logging.getLogger(__name__)


def _incident_fields(record: Any, index: int) -> dict[str, Any]:
    # Stricter than reading properties off any JSON value: a non-object fails here.
    if not isinstance(record, dict):
        raise FeedError(f"Feed record {index} is not an object.")
    # Absent keys bind as NULL.
    return {name: record.get(name) for name in INCIDENT_FIELDS}


async def populate_crimes(db: Database, feed: CrimeFeed) -> int:
    """
    Insert the first `MAX_POPULATE_RECORDS` feed records. Returns the insert count.
    """
    records = await feed.fetch_records()
    logger.info("feed_fetched url=%s records=%s", feed.url, len(records))

    inserted = 0
    for index, record in enumerate(records[:MAX_POPULATE_RECORDS]):
        await incident_repository.insert_incident(db, **_incident_fields(record, index))
        inserted += 1

    logger.info("populate_complete inserted=%s", inserted)
    return inserted
