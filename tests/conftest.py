"""
Pytest configuration and fixtures.
Provides an in-memory data source double, a fresh DI container and a test HTTP client.
"""

import asyncio
from typing import Dict, List

import pytest
from dependency_injector import providers
from httpx import ASGITransport, AsyncClient

from schedule_engine.core.exceptions import DataSourceError
from schedule_engine.deps import di_container
from schedule_engine.main import app
from schedule_engine.schemas.holiday import Holiday
from schedule_engine.schemas.leave_request import LeaveRequestCreate, LeaveRequestResponse


class FakeDataSource:
    """In-memory stand-in for DataSourceClient."""

    def __init__(self):
        self.entries: list = []
        self.holidays: Dict[int, List[Holiday]] = {}
        self.availability_calls: list = []
        self.holiday_calls: list = []
        self.leave_requests: List[LeaveRequestCreate] = []
        self.fail_availability = False
        self.fail_holidays = False
        self.reachable = True

    async def fetch_user_availability(self, user_id, start_date, end_date):
        self.availability_calls.append((user_id, start_date, end_date))
        await asyncio.sleep(0)
        if self.fail_availability:
            raise DataSourceError("GET /work-schedule/availabilities failed")
        return [entry for entry in self.entries if start_date <= entry.date <= end_date]

    async def fetch_holidays(self, year, country):
        self.holiday_calls.append((year, country))
        await asyncio.sleep(0)
        if self.fail_holidays:
            raise DataSourceError("GET /v1/calendar/holidays failed")
        return list(self.holidays.get(year, []))

    async def submit_leave_request(self, request):
        self.leave_requests.append(request)
        return LeaveRequestResponse(
            id=f"lr-{len(self.leave_requests)}",
            type=request.type,
            start_date=request.start_date,
            end_date=request.end_date,
            reason=request.reason,
        )

    async def ping(self):
        return self.reachable


@pytest.fixture
def fake_data_source() -> FakeDataSource:
    return FakeDataSource()


@pytest.fixture
def container(fake_data_source):
    """Fresh container whose data source is the in-memory double."""
    previous = di_container._container
    container = di_container.Container()
    container.config.from_dict(di_container.container_config())
    container.config.holiday_source.from_value("remote")
    container.data_source.override(providers.Object(fake_data_source))
    di_container._container = container
    yield container
    container.data_source.reset_override()
    di_container._container = previous


@pytest.fixture(scope="function")
async def test_client(container):
    """
    Create a test HTTP client.
    """
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
