"""
Holiday Pydantic schemas.
"""

import datetime as dt
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, TypeAdapter


class HolidayKind(str, Enum):
    """Whether a holiday falls on the same date every year."""
    FIXED = "fixed"
    MOVABLE = "movable"


class Holiday(BaseModel):
    """A calendar-wide non-working day."""
    date: dt.date
    description: str
    id: Optional[str] = None
    type: Optional[HolidayKind] = None

    class Config:
        frozen = True


class HolidayListResponse(BaseModel):
    """Schema for a holiday set response."""
    year: int
    country: str
    items: List[Holiday]
    total: int = Field(..., ge=0)


holiday_list_adapter = TypeAdapter(List[Holiday])
