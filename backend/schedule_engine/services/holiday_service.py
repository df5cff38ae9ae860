"""
Holiday reference data with per-key caching and request coalescing.

Holiday sets never change within a year, so results are kept until an
explicit clear. Concurrent requests for the same (year, country) share one
outbound fetch.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Dict, List, Optional

from schedule_engine.services.base_service import BaseService
from schedule_engine.schemas.holiday import Holiday

logger = logging.getLogger(__name__)

HolidayFetcher = Callable[[int, str], Awaitable[List[Holiday]]]


class HolidayCache(BaseService):
    """
    Memoizing, single-flight front for a holiday fetcher.

    Failed fetches resolve to an empty list for every waiting caller and are
    not cached, so the next call retries. Runs on one event loop: the cache
    and in-flight checks and the in-flight registration happen without an
    intervening await.
    """

    def __init__(self, fetcher: HolidayFetcher, default_country: str = "PL"):
        self._fetcher = fetcher
        self.default_country = default_country
        self._cache: Dict[str, List[Holiday]] = {}
        self._in_flight: Dict[str, "asyncio.Task[List[Holiday]]"] = {}

    @staticmethod
    def cache_key(year: int, country: str) -> str:
        return f"{year}-{country}"

    async def get_holidays(self, year: int, country: Optional[str] = None) -> List[Holiday]:
        """Get the holiday set for a year and country code."""
        country = country or self.default_country
        key = self.cache_key(year, country)

        if key in self._cache:
            return self._cache[key]

        task = self._in_flight.get(key)
        if task is not None:
            logger.debug(f"Reusing in-flight request for holidays {key}")
        else:
            logger.debug(f"Creating new request for holidays {key}")
            task = asyncio.ensure_future(self._load(key, year, country))
            self._in_flight[key] = task

        # A cancelled caller must not cancel the fetch other callers share
        return await asyncio.shield(task)

    async def _load(self, key: str, year: int, country: str) -> List[Holiday]:
        this_task = asyncio.current_task()
        try:
            holidays = await self._fetcher(year, country)
        except Exception as exc:
            logger.error(
                f"Failed to fetch holidays: {exc!r}",
                extra={"year": year, "country": country},
            )
            return []
        else:
            # Skip the write when clear() ran while the fetch was in flight
            if self._in_flight.get(key) is this_task:
                self._cache[key] = holidays
            return holidays
        finally:
            if self._in_flight.get(key) is this_task:
                del self._in_flight[key]

    def clear(self) -> None:
        """Forget every cached holiday set and in-flight request."""
        logger.info(
            "Clearing holiday cache",
            extra={"cached": len(self._cache), "in_flight": len(self._in_flight)},
        )
        self._cache.clear()
        self._in_flight.clear()

    @property
    def cached_keys(self) -> List[str]:
        return sorted(self._cache)

    @property
    def in_flight_keys(self) -> List[str]:
        return sorted(self._in_flight)
