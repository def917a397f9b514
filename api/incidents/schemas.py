"""
Pydantic schemas for incident endpoints.

Fields are required but untyped: values are bound to SQL exactly as received.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class NewIncidentRequest(BaseModel):
    case_number: Any
    date_time: Any
    code: Any
    incident: Any
    police_grid: Any
    neighborhood_number: Any
    block: Any


class RemoveIncidentRequest(BaseModel):
    case_number: Any
