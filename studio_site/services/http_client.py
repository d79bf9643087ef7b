"""HTTP client service for the platform's public JSON endpoints."""

from typing import Any

import httpx
import structlog

log = structlog.stdlib.get_logger()

# Live statistics are fetched fresh for every render cycle
NO_CACHE_HEADERS: dict[str, str] = {
    "Cache-Control": "no-cache, no-store",
    "Pragma": "no-cache",
}


class HttpClientService:
    """Thin async HTTP client: one attempt per request, non-2xx raises."""

    def __init__(
        self,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the HTTP client service.

        Args:
            timeout: Request timeout in seconds
            transport: Optional transport override (used by tests)
        """
        self.timeout = timeout

        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            headers={
                "User-Agent": "YannsStudiosSite/1.0",
                "Accept": "application/json",
                **NO_CACHE_HEADERS,
            },
            follow_redirects=True,
            limits=httpx.Limits(max_keepalive_connections=10, max_connections=20),
            transport=transport,
        )

        log.info("HTTP client service initialized", timeout=timeout)

    async def get(
        self,
        url: str,
        headers: dict[str, str] | None = None,
        params: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Make a single GET request.

        Args:
            url: The URL to request
            headers: Optional additional headers
            params: Optional query parameters

        Returns:
            HTTP response object with a 2xx status

        Raises:
            httpx.HTTPStatusError: If the response status is not successful
            httpx.RequestError: If the request could not be completed
        """
        merged_headers = self._client.headers.copy()
        if headers:
            merged_headers.update(headers)

        log.debug("Making HTTP GET request", url=url, params=params)

        try:
            response = await self._client.get(url, headers=merged_headers, params=params)
            response.raise_for_status()
        except (httpx.HTTPStatusError, httpx.RequestError) as e:
            log.warning(
                "HTTP GET request failed",
                url=url,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise

        log.info(
            "HTTP GET request successful",
            url=url,
            status_code=response.status_code,
            content_length=len(response.content),
        )
        return response

    async def get_json(
        self,
        url: str,
        params: dict[str, str] | None = None,
    ) -> Any:
        """GET a URL and decode its JSON body.

        Raises:
            httpx.HTTPStatusError: If the response status is not successful
            httpx.RequestError: If the request could not be completed
            ValueError: If the body is not valid JSON
        """
        response = await self.get(url, params=params)
        return response.json()

    async def close(self) -> None:
        """Close the HTTP client and clean up resources."""
        await self._client.aclose()
        log.info("HTTP client closed")

    async def __aenter__(self) -> "HttpClientService":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: type[Exception] | None, exc_val: Exception | None, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()
