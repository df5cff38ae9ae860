"""
HTTP client retry, timeout and error conversion tests against a local aiohttp server.
"""

import asyncio

import pytest
from aiohttp import test_utils, web

from schedule_engine.core.exceptions import DataSourceError
from schedule_engine.core.integrations.http.http_client import HttpClient


class RecordingBackoffClient(HttpClient):
    """HttpClient that remembers every backoff delay it waits."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.delays = []

    def backoff_delay(self, attempt):
        delay = super().backoff_delay(attempt)
        self.delays.append(delay)
        return delay


@pytest.fixture
async def upstream():
    """Start a local server answering every path with the given handler."""
    servers = []

    async def start(handler):
        app = web.Application()
        app.router.add_route("*", "/{tail:.*}", handler)
        server = test_utils.TestServer(app)
        await server.start_server()
        servers.append(server)
        return str(server.make_url(""))

    yield start
    for server in servers:
        await server.close()


@pytest.fixture
async def clients():
    created = []

    def make(base_url, client_class=HttpClient, **kwargs):
        client = client_class(base_url=base_url, **kwargs)
        created.append(client)
        return client

    yield make
    for client in created:
        await client.close()


def test_backoff_doubles_per_attempt():
    client = HttpClient(retry_delay=0.5)
    assert [client.backoff_delay(attempt) for attempt in range(3)] == [0.5, 1.0, 2.0]


@pytest.mark.asyncio
async def test_server_error_is_retried_until_attempts_run_out(upstream, clients):
    hits = []

    async def unavailable(request):
        hits.append(request.path)
        return web.Response(status=503)

    client = clients(await upstream(unavailable), RecordingBackoffClient, max_retries=3, retry_delay=0.01)

    with pytest.raises(DataSourceError) as exc_info:
        await client.get("/work-schedule/availabilities")

    assert len(hits) == 3
    assert client.delays == [0.01, 0.02]
    assert exc_info.value.details["status"] == 503
    assert exc_info.value.status_code == 502


@pytest.mark.asyncio
async def test_client_error_is_not_retried(upstream, clients):
    hits = []

    async def not_found(request):
        hits.append(request.path)
        return web.Response(status=404)

    client = clients(await upstream(not_found), max_retries=3, retry_delay=0)

    with pytest.raises(DataSourceError) as exc_info:
        await client.get("/v1/calendar/holidays/2024")

    assert hits == ["/v1/calendar/holidays/2024"]
    assert exc_info.value.details["status"] == 404


@pytest.mark.asyncio
async def test_timeout_becomes_data_source_error(upstream, clients):
    async def slow(request):
        await asyncio.sleep(0.5)
        return web.json_response([])

    client = clients(await upstream(slow), timeout=0.05, max_retries=2, retry_delay=0)

    with pytest.raises(DataSourceError) as exc_info:
        await client.get("/health")

    assert exc_info.value.details["status"] is None


@pytest.mark.asyncio
async def test_transient_failure_recovers_on_retry(upstream, clients):
    hits = []

    async def flaky(request):
        hits.append(request.query.get("userId"))
        if len(hits) == 1:
            return web.Response(status=500)
        return web.json_response([{"ok": True}])

    client = clients(await upstream(flaky), max_retries=3, retry_delay=0)

    payload = await client.get("/work-schedule/availabilities", params={"userId": "user-1"})

    assert payload == [{"ok": True}]
    assert hits == ["user-1", "user-1"]


@pytest.mark.asyncio
async def test_post_sends_json_body(upstream, clients):
    received = []

    async def echo(request):
        received.append(await request.json())
        return web.json_response({"id": "lr-1"}, status=201)

    client = clients(await upstream(echo), retry_delay=0)

    payload = await client.post("/work-schedule/leave-requests", json={"type": "holiday"})

    assert payload == {"id": "lr-1"}
    assert received == [{"type": "holiday"}]
