"""
Client for the remote workforce data source.
Wraps HttpClient with typed request/response models.
"""

from datetime import date
from typing import List

from pydantic import ValidationError

from schedule_engine.core.exceptions import DataSourceError
from schedule_engine.core.integrations.http.http_client import HttpClient
from schedule_engine.core.logging import get_logger
from schedule_engine.schemas.holiday import Holiday, holiday_list_adapter
from schedule_engine.schemas.leave_request import LeaveRequestCreate, LeaveRequestResponse
from schedule_engine.schemas.schedule import ScheduleEntry, schedule_entry_list_adapter
from schedule_engine.utils.time_utils import format_date_for_api

logger = get_logger(__name__)


class DataSourceClient:
    """
    Remote data source operations used by the engine.

    Every method raises DataSourceError when the request fails or the
    payload does not match the expected shape.
    """

    AVAILABILITY_ENDPOINT = "/work-schedule/availabilities"
    HOLIDAYS_ENDPOINT = "/v1/calendar/holidays/{year}"
    LEAVE_REQUESTS_ENDPOINT = "/work-schedule/leave-requests"
    HEALTH_ENDPOINT = "/health"

    def __init__(self, http_client: HttpClient):
        self.http_client = http_client

    async def fetch_user_availability(
        self,
        user_id: str,
        start_date: date,
        end_date: date,
    ) -> List[ScheduleEntry]:
        """
        Get a user's availability and leave entries for an inclusive date range.
        """
        payload = await self.http_client.get(
            self.AVAILABILITY_ENDPOINT,
            params={
                "userId": user_id,
                "startDate": format_date_for_api(start_date),
                "endDate": format_date_for_api(end_date),
            },
        )
        try:
            entries = schedule_entry_list_adapter.validate_python(payload)
        except ValidationError as e:
            raise DataSourceError(
                "Malformed availability payload",
                details={"user_id": user_id, "errors": e.errors(include_url=False, include_context=False)},
            ) from e
        logger.debug(
            "Fetched availability",
            extra={"user_id": user_id, "count": len(entries)},
        )
        return entries

    async def fetch_holidays(self, year: int, country: str) -> List[Holiday]:
        """Get the full-year holiday set for a country code."""
        payload = await self.http_client.get(
            self.HOLIDAYS_ENDPOINT.format(year=year),
            params={"country": country},
        )
        try:
            return holiday_list_adapter.validate_python(payload)
        except ValidationError as e:
            raise DataSourceError(
                "Malformed holiday payload",
                details={"year": year, "country": country},
            ) from e

    async def submit_leave_request(self, request: LeaveRequestCreate) -> LeaveRequestResponse:
        """Create a leave request."""
        payload = await self.http_client.post(
            self.LEAVE_REQUESTS_ENDPOINT,
            json=request.model_dump(mode="json", by_alias=True, exclude_none=True),
        )
        try:
            return LeaveRequestResponse.model_validate(payload)
        except ValidationError as e:
            raise DataSourceError("Malformed leave request response") from e

    async def ping(self) -> bool:
        """True when the data source answers its health endpoint."""
        try:
            await self.http_client.get(self.HEALTH_ENDPOINT)
        except DataSourceError:
            return False
        return True
