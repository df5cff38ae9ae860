"""
Leave request API endpoints.
"""

from typing import List

from fastapi import APIRouter, Query, Request, status

from schedule_engine.core.rate_limit import WRITE_LIMIT, limiter
from schedule_engine.deps.di_container import get_container
from schedule_engine.schemas.leave_request import (
    EmploymentType,
    LeaveRequestCreate,
    LeaveRequestResponse,
    LeaveTypeOption,
)

router = APIRouter()


@router.get("/types", response_model=List[LeaveTypeOption])
async def list_leave_types(
    employment_type: EmploymentType = Query(None),
) -> List[LeaveTypeOption]:
    """Leave types offered under an employment type."""
    controller = get_container().leave_request_controller()
    return controller.list_leave_types(employment_type)


@router.post("", response_model=LeaveRequestResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(WRITE_LIMIT)
async def submit_leave_request(
    request: Request,
    leave_request: LeaveRequestCreate,
) -> LeaveRequestResponse:
    """Submit a leave request to the data source."""
    controller = get_container().leave_request_controller()
    return await controller.submit(leave_request)
