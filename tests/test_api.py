"""
HTTP API tests against the in-memory data source.
"""

from datetime import date, timedelta

import pytest

from factories import available, leave
from schedule_engine.schemas.holiday import Holiday
from schedule_engine.schemas.schedule import LeaveStatus

API = "/api/v1"


@pytest.mark.asyncio
async def test_validate_availability(test_client):
    response = await test_client.post(f"{API}/availability/validate", json={
        "start_date": "2024-05-06",
        "end_date": "2024-05-10",
        "slots": [{"start": "09:00", "end": "12:00"}, {"start": "11:00", "end": "15:00"}],
    })

    assert response.status_code == 200
    data = response.json()
    assert data["valid"] is False
    assert [slot["error"] for slot in data["slots"]] == ["Time slots cannot overlap", "Time slots cannot overlap"]


@pytest.mark.asyncio
async def test_validate_availability_requires_date_range(test_client):
    response = await test_client.post(f"{API}/availability/validate", json={
        "slots": [{"start": "09:00", "end": "17:00"}],
    })

    data = response.json()
    assert data["valid"] is False
    assert data["date_range_error"] == "Please select a date range"


@pytest.mark.asyncio
async def test_validate_availability_rejects_too_many_slots(test_client):
    response = await test_client.post(f"{API}/availability/validate", json={
        "start_date": "2024-05-06",
        "end_date": "2024-05-06",
        "slots": [
            {"start": "06:00", "end": "08:00"},
            {"start": "09:00", "end": "12:00"},
            {"start": "13:00", "end": "17:00"},
        ],
    })

    assert response.status_code == 422
    assert response.json()["error"]["message"] == "At most 2 time slots per day"


@pytest.mark.asyncio
async def test_month_view(test_client, fake_data_source):
    fake_data_source.entries = [
        available(date(2024, 5, 6), "09:00", "17:00"),
        leave(date(2024, 5, 7), LeaveStatus.PENDING),
        available(date(2024, 5, 3), "09:00", "17:00"),
    ]
    fake_data_source.holidays[2024] = [Holiday(date=date(2024, 5, 3), description="Constitution Day")]

    response = await test_client.get(f"{API}/calendar/user-1/month", params={"year": 2024, "month": 5})

    assert response.status_code == 200
    data = response.json()
    assert data["range_start"] == "2024-04-29"
    assert data["range_end"] == "2024-06-02"
    assert len(data["days"]) == 35
    statuses = {day["date"]: day["status"] for day in data["days"]}
    assert statuses["2024-05-03"] == "holiday"
    assert statuses["2024-05-06"] == "available"
    assert statuses["2024-05-07"] == "leave_pending"
    assert statuses["2024-05-08"] == "unavailable"
    assert data["summary"] == {"working_hours": 16, "leave_days": 1, "holidays_in_month": 1}
    assert data["availability_error"] is None


@pytest.mark.asyncio
async def test_month_view_reports_availability_failure(test_client, fake_data_source):
    fake_data_source.fail_availability = True

    response = await test_client.get(f"{API}/calendar/user-1/month", params={"year": 2024, "month": 5})

    assert response.status_code == 200
    data = response.json()
    assert data["availability_error"] is not None
    assert {day["status"] for day in data["days"]} == {"unavailable"}


@pytest.mark.asyncio
async def test_month_view_rejects_bad_month(test_client):
    response = await test_client.get(f"{API}/calendar/user-1/month", params={"year": 2024, "month": 13})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_day_view(test_client, fake_data_source):
    fake_data_source.entries = [
        available(date(2024, 5, 6), "13:00", "17:00"),
        available(date(2024, 5, 6), "08:00", "12:00"),
    ]

    response = await test_client.get(f"{API}/calendar/user-1/day/2024-05-06")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "available"
    assert [window["start_time"] for window in data["windows"]] == ["08:00", "13:00"]


@pytest.mark.asyncio
async def test_holidays_are_cached_until_cleared(test_client, fake_data_source):
    fake_data_source.holidays[2024] = [Holiday(date=date(2024, 1, 1), description="New Year")]

    first = await test_client.get(f"{API}/holidays/2024")
    await test_client.get(f"{API}/holidays/2024")

    assert first.json()["total"] == 1
    assert first.json()["country"] == "PL"
    assert fake_data_source.holiday_calls == [(2024, "PL")]

    cleared = await test_client.delete(f"{API}/holidays/cache")
    await test_client.get(f"{API}/holidays/2024")

    assert cleared.status_code == 204
    assert fake_data_source.holiday_calls == [(2024, "PL"), (2024, "PL")]


@pytest.mark.asyncio
async def test_holiday_failure_returns_empty_set(test_client, fake_data_source):
    fake_data_source.fail_holidays = True

    response = await test_client.get(f"{API}/holidays/2024")

    assert response.status_code == 200
    assert response.json()["items"] == []


@pytest.mark.asyncio
async def test_weekly_grid(test_client):
    response = await test_client.post(f"{API}/weekly-grid", json={
        "anchor_date": "2024-05-08",
        "today": "2024-05-08",
        "entries": [
            {"date": "2024-05-08", "startTime": "13:00", "endTime": "17:00", "workLine": "sales"},
            {"date": "2024-05-08", "startTime": "09:00", "endTime": "12:00", "workLine": "sales"},
        ],
    })

    assert response.status_code == 200
    data = response.json()
    assert data["week_start"] == "2024-05-06"
    assert data["can_go_forward"] is True
    [block] = data["blocks"]
    assert (block["start_time"], block["end_time"]) == ("09:00", "17:00")
    assert block["top_offset"] == 9 * 48
    assert block["height"] == 8 * 48


@pytest.mark.asyncio
async def test_weekly_grid_rejects_malformed_time(test_client):
    response = await test_client.post(f"{API}/weekly-grid", json={
        "anchor_date": "2024-05-08",
        "entries": [{"date": "2024-05-08", "startTime": "nine", "endTime": "17:00", "workLine": "sales"}],
    })

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_leave_types(test_client):
    response = await test_client.get(f"{API}/leave-requests/types", params={"employment_type": "contractor"})

    assert response.status_code == 200
    assert [option["value"] for option in response.json()] == ["sick_leave", "personal_leave"]


@pytest.mark.asyncio
async def test_submit_leave_request(test_client, fake_data_source):
    start = date.today() + timedelta(days=7)

    response = await test_client.post(f"{API}/leave-requests", json={
        "type": "holiday",
        "startDate": start.isoformat(),
        "endDate": (start + timedelta(days=2)).isoformat(),
        "userId": "user-1",
    })

    assert response.status_code == 201
    assert response.json()["id"] == "lr-1"
    assert fake_data_source.leave_requests[0].user_id == "user-1"


@pytest.mark.asyncio
async def test_submit_leave_request_in_the_past(test_client, fake_data_source):
    start = date.today() - timedelta(days=3)

    response = await test_client.post(f"{API}/leave-requests", json={
        "type": "holiday",
        "startDate": start.isoformat(),
        "endDate": start.isoformat(),
    })

    assert response.status_code == 422
    assert fake_data_source.leave_requests == []
