"""
Schedule entry read model as delivered by the remote data source.

An entry is either an availability window or a leave record for one date.
The `type` field discriminates the two variants; field aliases follow the
data source's camelCase wire format.
"""

import datetime as dt
from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter


class LeaveStatus(str, Enum):
    """Lifecycle status of a leave record."""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    CANCELLED = "cancelled"


class AvailabilityMeta(BaseModel):
    """Payload of an availability window."""
    id: str
    start_time: str = Field(..., alias="startTime")  # HH:MM
    end_time: str = Field(..., alias="endTime")  # HH:MM

    class Config:
        populate_by_name = True
        frozen = True


class LeaveMeta(BaseModel):
    """Payload of a leave record."""
    id: str
    leave_type: str = Field(..., alias="leaveType")
    leave_type_label: str = Field(..., alias="leaveTypeLabel")
    status: LeaveStatus
    reason: Optional[str] = None
    color: Optional[str] = None  # hex, e.g. "#FFD700"

    class Config:
        populate_by_name = True
        frozen = True


class AvailableEntry(BaseModel):
    """A declared availability window on one date."""
    date: dt.date
    type: Literal["available"] = "available"
    meta: AvailabilityMeta

    class Config:
        frozen = True


class LeaveEntry(BaseModel):
    """A day-level leave record."""
    date: dt.date
    type: Literal["leave"] = "leave"
    meta: LeaveMeta

    class Config:
        frozen = True


ScheduleEntry = Annotated[Union[AvailableEntry, LeaveEntry], Field(discriminator="type")]

schedule_entry_list_adapter = TypeAdapter(List[ScheduleEntry])
