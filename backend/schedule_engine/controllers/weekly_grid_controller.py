"""
Weekly grid controller.
"""

from schedule_engine.controllers.base_controller import BaseController
from schedule_engine.core.exceptions import AppException
from schedule_engine.services.weekly_grid_service import WeeklyGridService
from schedule_engine.schemas.weekly_schedule import WeekLayout, WeeklyGridRequest


class WeeklyGridController(BaseController):
    """Controller for weekly schedule layout."""

    def __init__(self, weekly_grid_service: WeeklyGridService):
        self.weekly_grid_service = weekly_grid_service

    def build_layout(self, request: WeeklyGridRequest) -> WeekLayout:
        try:
            return self.weekly_grid_service.build_week_layout(
                request.entries,
                request.anchor_date,
                today=request.today,
            )
        except ValueError as e:
            raise AppException(str(e), status_code=422) from e
