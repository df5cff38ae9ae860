"""
Availability submission schemas.
"""

import datetime as dt
from typing import List, Optional

from pydantic import BaseModel, Field


class TimeSlot(BaseModel):
    """A time-of-day window in zero-padded HH:MM."""
    start: str = Field(..., examples=["09:00"])
    end: str = Field(..., examples=["17:00"])


class ValidatedTimeSlot(TimeSlot):
    """A time slot annotated with its validation error, if any."""
    error: Optional[str] = None


class SlotValidationRequest(BaseModel):
    """Schema for validating an availability submission."""
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None
    slots: List[TimeSlot] = Field(default_factory=list)


class SlotValidationResponse(BaseModel):
    """Schema for the validation outcome of an availability submission."""
    valid: bool
    slots: List[ValidatedTimeSlot]
    date_range_error: Optional[str] = None
