"""
Async HTTP client wrapper using aiohttp.
Adds a total request timeout, retry with exponential backoff and
conversion of transport failures into DataSourceError.
"""

import asyncio
from typing import Optional, Dict, Any
import aiohttp
import logging

from schedule_engine.core.exceptions import DataSourceError

logger = logging.getLogger(__name__)


class HttpClient:
    """
    Async JSON client for the remote data source.
    Provides get/post with retry/backoff support.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 10,
        max_retries: int = 3,
        retry_delay: float = 0.5,
    ):
        """
        Initialize HTTP client.

        Args:
            base_url: Optional base URL for all requests
            timeout: Total request timeout in seconds
            max_retries: Maximum number of attempts per request
            retry_delay: Initial delay between retries in seconds
        """
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.max_retries = max(1, max_retries)
        self.retry_delay = retry_delay
        self._session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self.timeout,
                headers={"Content-Type": "application/json"},
            )
        return self._session

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()

    def backoff_delay(self, attempt: int) -> float:
        """Delay before the retry that follows a failed zero-based attempt."""
        return self.retry_delay * (2 ** attempt)

    def _build_url(self, endpoint: str) -> str:
        """Build full URL from endpoint."""
        if self.base_url:
            return f"{self.base_url.rstrip('/')}/{endpoint.lstrip('/')}"
        return endpoint

    async def _request_with_retry(
        self,
        method: str,
        url: str,
        **kwargs: Any,
    ) -> Any:
        """
        Make HTTP request with retry logic and decode the JSON body.

        Client errors (4xx) are not retried.

        Raises:
            DataSourceError: when every attempt failed
        """
        session = await self._get_session()
        last_exception: Optional[BaseException] = None

        for attempt in range(self.max_retries):
            try:
                async with session.request(method, url, **kwargs) as response:
                    response.raise_for_status()
                    if response.content_type == "application/json":
                        return await response.json()
                    return await response.text()
            except aiohttp.ClientResponseError as e:
                last_exception = e
                if e.status < 500:
                    logger.warning(
                        f"{method} {url} rejected with status {e.status}",
                        extra={"status": e.status},
                    )
                    break
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                last_exception = e

            if attempt < self.max_retries - 1:
                delay = self.backoff_delay(attempt)
                logger.warning(
                    f"Request failed (attempt {attempt + 1}/{self.max_retries}): {last_exception!r}. "
                    f"Retrying in {delay}s..."
                )
                await asyncio.sleep(delay)
            else:
                logger.error(f"Request failed after {self.max_retries} attempts: {last_exception!r}")

        status = getattr(last_exception, "status", None)
        raise DataSourceError(
            f"{method} {url} failed",
            details={"status": status, "reason": repr(last_exception)},
        ) from last_exception

    async def get(
        self,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """
        Make GET request.

        Args:
            endpoint: API endpoint
            params: Query parameters
            headers: Request headers

        Returns:
            Decoded JSON response
        """
        url = self._build_url(endpoint)
        return await self._request_with_retry("GET", url, params=params, headers=headers)

    async def post(
        self,
        endpoint: str,
        json: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """
        Make POST request with a JSON body.

        Returns:
            Decoded JSON response
        """
        url = self._build_url(endpoint)
        return await self._request_with_retry("POST", url, json=json, headers=headers)
