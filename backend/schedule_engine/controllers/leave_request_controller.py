"""
Leave request controller.
"""

from typing import List, Optional

from schedule_engine.controllers.base_controller import BaseController
from schedule_engine.services.leave_request_service import LeaveRequestService, available_leave_types
from schedule_engine.schemas.leave_request import (
    EmploymentType,
    LeaveRequestCreate,
    LeaveRequestResponse,
    LeaveTypeOption,
)


class LeaveRequestController(BaseController):
    """Controller for leave request operations."""

    def __init__(self, leave_request_service: LeaveRequestService):
        self.leave_request_service = leave_request_service

    def list_leave_types(self, employment_type: Optional[EmploymentType]) -> List[LeaveTypeOption]:
        return available_leave_types(employment_type)

    async def submit(self, request: LeaveRequestCreate) -> LeaveRequestResponse:
        return await self.leave_request_service.submit(request)
