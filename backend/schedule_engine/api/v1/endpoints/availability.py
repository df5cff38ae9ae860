"""
Availability API endpoints.
"""

from fastapi import APIRouter

from schedule_engine.deps.di_container import get_container
from schedule_engine.schemas.availability import SlotValidationRequest, SlotValidationResponse

router = APIRouter()


@router.post("/validate", response_model=SlotValidationResponse)
async def validate_availability(
    submission: SlotValidationRequest,
) -> SlotValidationResponse:
    """Check an availability submission for malformed and overlapping time slots."""
    controller = get_container().availability_controller()
    return controller.validate_submission(submission)
