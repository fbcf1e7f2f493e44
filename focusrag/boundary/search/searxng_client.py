"""
SearxNG metasearch client.

Issues JSON searches against a SearxNG instance and normalizes the raw
payload into SearchResponse models. One httpx.AsyncClient (connection pool)
is shared by all requests of the process.

Dependencies: httpx, focusrag.models.document
System role: Search gateway
"""

import logging
import time

import httpx
from pydantic import ValidationError

from focusrag.core.exceptions import SearchUnavailableError
from focusrag.models.document import SearchResponse

logger = logging.getLogger(__name__)


class SearxngClient:
    """
    Async client for the SearxNG JSON search API.

    The client never retries; every failure surfaces as
    SearchUnavailableError so the pipeline can terminate cleanly.
    """

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 20.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: SearxNG instance URL, e.g. http://localhost:8080
            timeout_seconds: Bound on each search request
            client: Optional shared httpx client (created when omitted)
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout_seconds
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=httpx.Timeout(timeout_seconds))

    @property
    def base_url(self) -> str:
        """Configured instance URL."""
        return self._base_url

    async def search(
        self,
        query: str,
        language: str | None = None,
        engines: list[str] | None = None,
    ) -> SearchResponse:
        """
        Run one search.

        Args:
            query: Search query text
            language: Optional language filter, passed through verbatim
            engines: Optional engine names, joined by commas

        Returns:
            SearchResponse: Results in backend order plus suggestions

        Raises:
            SearchUnavailableError: Network failure, timeout, non-2xx status
                or a payload that is not a SearxNG JSON response
        """
        params = {"q": query, "format": "json"}
        if language:
            params["language"] = language
        if engines:
            params["engines"] = ",".join(engines)

        logger.info(f"{__name__}:search - START engines={params.get('engines')}, query_len={len(query)}")
        start = time.perf_counter()

        try:
            response = await self._client.get(
                f"{self._base_url}/search",
                params=params,
                timeout=self._timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.TimeoutException as e:
            raise SearchUnavailableError(
                f"Search timed out after {self._timeout}s",
                operation="search",
            ) from e
        except httpx.HTTPStatusError as e:
            raise SearchUnavailableError(
                f"Search backend returned HTTP {e.response.status_code}",
                operation="search",
                details={"status_code": e.response.status_code},
            ) from e
        except httpx.HTTPError as e:
            raise SearchUnavailableError(
                f"Search backend unreachable: {type(e).__name__}",
                operation="search",
            ) from e
        except ValueError as e:
            raise SearchUnavailableError("Search backend returned invalid JSON", operation="search") from e

        if not isinstance(payload, dict):
            raise SearchUnavailableError("Search backend returned an unexpected payload", operation="search")

        try:
            result = SearchResponse.model_validate(
                {
                    "results": payload.get("results") or [],
                    "suggestions": payload.get("suggestions") or [],
                }
            )
        except ValidationError as e:
            raise SearchUnavailableError("Search backend returned malformed results", operation="search") from e

        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(f"{__name__}:search - DONE results={len(result.results)}, elapsed_ms={elapsed_ms:.0f}")
        return result

    async def aclose(self) -> None:
        """Close the underlying connection pool when this client created it."""
        if self._owns_client:
            await self._client.aclose()
