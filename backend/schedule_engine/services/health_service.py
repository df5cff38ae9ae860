"""
Health service.
Reports uptime, data source reachability and holiday cache state.
"""

import time
from typing import Optional

from schedule_engine.core.config import settings
from schedule_engine.core.integrations.data_source import DataSourceClient
from schedule_engine.services.base_service import BaseService
from schedule_engine.services.holiday_service import HolidayCache
from schedule_engine.schemas.health import HealthResponse


class HealthService(BaseService):
    """Service for health check operations."""

    def __init__(
        self,
        data_source: Optional[DataSourceClient] = None,
        holiday_cache: Optional[HolidayCache] = None,
    ):
        self.start_time = time.time()
        self.data_source = data_source
        self.holiday_cache = holiday_cache

    async def get_health(self, check_data_source: bool = True) -> HealthResponse:
        """
        Get system health status.

        Returns:
            HealthResponse with status, uptime, and checks
        """
        uptime_seconds = int(time.time() - self.start_time)
        uptime_str = f"PT{uptime_seconds}S"  # ISO 8601 duration format

        checks = {}

        if check_data_source and self.data_source is not None:
            reachable = await self.data_source.ping()
            checks["data_source"] = "ok" if reachable else "error: unreachable"

        if self.holiday_cache is not None:
            checks["holiday_cache"] = "ok"
            cached = self.holiday_cache.cached_keys
        else:
            cached = []

        status = "ok" if all(check == "ok" for check in checks.values()) else "degraded"

        return HealthResponse(
            status=status,
            uptime=uptime_str,
            version=settings.VERSION,
            checks=checks,
            cached_holiday_sets=cached,
        )
