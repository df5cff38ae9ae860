"""
Weekly schedule grid schemas.
"""

import datetime as dt
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class WorkLine(str, Enum):
    """Classification a shift is worked under."""
    CUSTOMER_SERVICE = "customer_service"
    SALES = "sales"
    TECHNICAL = "technical"
    ADMIN = "admin"
    SUPPORT = "support"


WORK_LINE_LABELS = {
    WorkLine.CUSTOMER_SERVICE: "Customer Service",
    WorkLine.SALES: "Sales",
    WorkLine.TECHNICAL: "Technical",
    WorkLine.ADMIN: "Admin",
    WorkLine.SUPPORT: "Support",
}


class WeeklyScheduleEntry(BaseModel):
    """A single planned shift."""
    date: dt.date
    start_time: str = Field(..., alias="startTime")
    end_time: str = Field(..., alias="endTime")
    work_line: WorkLine = Field(..., alias="workLine")
    location: Optional[str] = None

    class Config:
        populate_by_name = True
        frozen = True


class WorkBlock(BaseModel):
    """All shifts of one work line on one day, merged into a positioned block."""
    day_index: int = Field(..., ge=1, le=7)
    date: dt.date
    work_line: WorkLine
    label: str
    start_time: str
    end_time: str
    top_offset: float
    height: float
    entry_count: int = Field(..., ge=1)


class WeekLayout(BaseModel):
    """Positioned blocks for the week containing the anchor date."""
    week_start: dt.date
    week_end: dt.date
    unit_height: float
    can_go_forward: bool = True
    blocks: List[WorkBlock] = []


class WeeklyGridRequest(BaseModel):
    """Schema for a weekly grid layout request."""
    anchor_date: dt.date
    today: Optional[dt.date] = None
    entries: List[WeeklyScheduleEntry] = Field(default_factory=list)
