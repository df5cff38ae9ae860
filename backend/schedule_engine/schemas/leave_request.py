"""
Leave request Pydantic schemas.
"""

import datetime as dt
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from schedule_engine.schemas.schedule import LeaveStatus


class LeaveType(str, Enum):
    """Leave types known to the data source."""
    SICK_LEAVE = "sick_leave"
    HOLIDAY = "holiday"
    PERSONAL_LEAVE = "personal_leave"
    PATERNITY_LEAVE = "paternity_leave"
    MATERNITY_LEAVE = "maternity_leave"


class EmploymentType(str, Enum):
    """Contract under which a worker is engaged."""
    EMPLOYMENT_CONTRACT = "employment_contract"
    CIVIL_CONTRACT = "civil_contract"
    CONTRACTOR = "contractor"


class LeaveTypeOption(BaseModel):
    """A leave type offered to a worker."""
    value: LeaveType
    label: str
    description: str


class LeaveRequestCreate(BaseModel):
    """Schema for submitting a leave request."""
    type: LeaveType
    start_date: dt.date = Field(..., alias="startDate")
    end_date: dt.date = Field(..., alias="endDate")
    reason: Optional[str] = Field(None, max_length=2000)
    user_id: Optional[str] = Field(None, alias="userId")
    employment_type: Optional[EmploymentType] = Field(None, alias="employmentType", exclude=True)

    class Config:
        populate_by_name = True


class LeaveRequestResponse(BaseModel):
    """Schema for a leave request as stored by the data source."""
    id: str
    type: LeaveType
    start_date: dt.date = Field(..., alias="startDate")
    end_date: dt.date = Field(..., alias="endDate")
    reason: Optional[str] = None
    status: LeaveStatus = LeaveStatus.PENDING
    created_at: Optional[dt.datetime] = Field(None, alias="createdAt")
    updated_at: Optional[dt.datetime] = Field(None, alias="updatedAt")

    class Config:
        populate_by_name = True
