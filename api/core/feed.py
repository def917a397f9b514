"""
Upstream crime feed client.

The feed is a single GET endpoint returning a JSON array of incident records:
- GET <CRIME_FEED_URL> -> [{"case_number": "...", "date_time": "...", ...}, ...]
"""

from __future__ import annotations

from typing import Any

import httpx
from fastapi import Request

from .errors import ServiceError


# Feed failures are explicit and separable from store errors.
class FeedError(ServiceError):
    pass


class CrimeFeed:
    def __init__(self, url: str, *, transport: httpx.AsyncBaseTransport | None = None) -> None:
        url = (url or "").strip()
        if not url:
            raise FeedError("CRIME_FEED_URL is empty.")
        self.url = url
        self._transport = transport

    async def fetch_records(self) -> list[Any]:
        """
        Download the feed and return its records in feed order.

        No timeout and no retry: a hung upstream hangs the caller.
        """
        try:
            async with httpx.AsyncClient(timeout=None, transport=self._transport) as client:
                resp = await client.get(self.url)
        except httpx.HTTPError as exc:
            raise FeedError(f"Crime feed request failed: {exc}") from exc

        if resp.status_code != 200:
            # Avoid dumping huge bodies; include a small snippet.
            body = resp.text[:500]
            raise FeedError(f"Crime feed request failed: {resp.status_code} {body}")

        try:
            data = resp.json()
        except ValueError as exc:
            raise FeedError("Crime feed returned invalid JSON.") from exc

        if not isinstance(data, list):
            raise FeedError("Crime feed did not return a JSON array.")
        return data


def get_feed(request: Request) -> CrimeFeed:
    return request.app.state.feed
