"""
Availability submission controller.
"""

from schedule_engine.controllers.base_controller import BaseController
from schedule_engine.core.exceptions import AppException
from schedule_engine.schemas.availability import SlotValidationRequest, SlotValidationResponse
from schedule_engine.services.slot_validator import has_slot_errors, validate_time_slots


class AvailabilityController(BaseController):
    """Controller for validating availability windows before they are saved."""

    def __init__(self, max_slots: int = 2):
        self.max_slots = max_slots

    def validate_submission(self, request: SlotValidationRequest) -> SlotValidationResponse:
        """
        Validate the date range and every time slot of a submission.

        Raises:
            AppException: when more slots are submitted than a day allows
        """
        if len(request.slots) > self.max_slots:
            raise AppException(
                f"At most {self.max_slots} time slots per day",
                status_code=422,
                details={"submitted": len(request.slots)},
            )

        date_range_error = None
        if request.start_date is None or request.end_date is None:
            date_range_error = "Please select a date range"
        elif request.end_date < request.start_date:
            date_range_error = "Invalid date range"

        slots = validate_time_slots(request.slots)
        return SlotValidationResponse(
            valid=date_range_error is None and not has_slot_errors(slots),
            slots=slots,
            date_range_error=date_range_error,
        )
