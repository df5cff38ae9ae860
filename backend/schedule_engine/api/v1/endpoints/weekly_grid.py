"""
Weekly grid API endpoints.
"""

from fastapi import APIRouter

from schedule_engine.deps.di_container import get_container
from schedule_engine.schemas.weekly_schedule import WeekLayout, WeeklyGridRequest

router = APIRouter()


@router.post("", response_model=WeekLayout)
async def build_weekly_grid(
    grid_request: WeeklyGridRequest,
) -> WeekLayout:
    """Merge a worker's shifts into positioned blocks for one week."""
    controller = get_container().weekly_grid_controller()
    return controller.build_layout(grid_request)
