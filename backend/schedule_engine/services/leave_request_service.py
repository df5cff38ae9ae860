"""
Leave request service with business logic.
"""

import logging
from datetime import date
from typing import List, Optional

from schedule_engine.core.exceptions import LeaveRequestError
from schedule_engine.core.integrations.data_source import DataSourceClient
from schedule_engine.services.base_service import BaseService
from schedule_engine.schemas.leave_request import (
    EmploymentType,
    LeaveRequestCreate,
    LeaveRequestResponse,
    LeaveType,
    LeaveTypeOption,
)

logger = logging.getLogger(__name__)


ALL_LEAVE_TYPES = [
    LeaveTypeOption(
        value=LeaveType.SICK_LEAVE,
        label="Sick Leave",
        description="Time off due to illness or medical condition",
    ),
    LeaveTypeOption(
        value=LeaveType.HOLIDAY,
        label="Holiday",
        description="Annual paid vacation leave",
    ),
    LeaveTypeOption(
        value=LeaveType.PERSONAL_LEAVE,
        label="Personal Leave",
        description="Time off for personal matters",
    ),
    LeaveTypeOption(
        value=LeaveType.PATERNITY_LEAVE,
        label="Paternity Leave",
        description="Leave for fathers after child birth",
    ),
    LeaveTypeOption(
        value=LeaveType.MATERNITY_LEAVE,
        label="Maternity Leave",
        description="Leave for mothers before and after child birth",
    ),
]

BASIC_LEAVE_TYPES = {LeaveType.SICK_LEAVE, LeaveType.PERSONAL_LEAVE}


def available_leave_types(employment_type: Optional[EmploymentType]) -> List[LeaveTypeOption]:
    """Leave types a worker may request under their contract."""
    if employment_type == EmploymentType.EMPLOYMENT_CONTRACT:
        return list(ALL_LEAVE_TYPES)
    if employment_type in (EmploymentType.CIVIL_CONTRACT, EmploymentType.CONTRACTOR):
        return [option for option in ALL_LEAVE_TYPES if option.value in BASIC_LEAVE_TYPES]
    return []


class LeaveRequestService(BaseService):
    """Service for leave request operations."""

    def __init__(self, data_source: DataSourceClient):
        self.data_source = data_source

    def validate(self, request: LeaveRequestCreate, today: Optional[date] = None) -> None:
        """
        Check a request before it is sent.

        Raises:
            LeaveRequestError: on an inverted or past date range, or a leave
                type not offered for the given employment type
        """
        today = today or date.today()
        if request.end_date < request.start_date:
            raise LeaveRequestError(
                "Invalid date range",
                details={"start_date": request.start_date.isoformat(), "end_date": request.end_date.isoformat()},
            )
        if request.start_date < today:
            raise LeaveRequestError(
                "Leave cannot start in the past",
                details={"start_date": request.start_date.isoformat(), "today": today.isoformat()},
            )
        if request.employment_type is not None:
            offered = {option.value for option in available_leave_types(request.employment_type)}
            if request.type not in offered:
                raise LeaveRequestError(
                    f"Leave type {request.type.value} is not available for {request.employment_type.value}",
                )

    async def submit(self, request: LeaveRequestCreate, today: Optional[date] = None) -> LeaveRequestResponse:
        """Validate and submit a leave request."""
        self.validate(request, today=today)
        response = await self.data_source.submit_leave_request(request)
        logger.info(
            "Leave request submitted",
            extra={"leave_request_id": response.id, "user_id": request.user_id, "type": request.type.value},
        )
        return response
