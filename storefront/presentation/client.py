"""Storefront API client.

Thin HTTP client the presentation layer uses to query the catalog API.
Every call returns an APIResponse; transport failures are reported as
errors instead of being raised.
"""

from dataclasses import dataclass, field
from typing import Any

import httpx
import structlog

from storefront.infrastructure.config import settings

logger = structlog.get_logger()


@dataclass
class APIError:
    """Error reported by the catalog API or by the transport."""

    error_code: str
    message: str
    status_code: int
    details: list[dict[str, Any]] = field(default_factory=list)

    @property
    def retryable(self) -> bool:
        """Whether trying again later might succeed."""
        return self.status_code >= 500 or self.error_code in ("TIMEOUT", "REQUEST_ERROR")


@dataclass
class APIResponse:
    """Outcome of one API call: data on success, error otherwise."""

    success: bool
    data: dict[str, Any] | None = None
    error: APIError | None = None


def failure(
    error_code: str,
    message: str,
    status_code: int,
    details: list[dict[str, Any]] | None = None,
) -> APIResponse:
    """Build a failed response."""
    return APIResponse(
        success=False,
        error=APIError(error_code, message, status_code, details or []),
    )


class StorefrontClient:
    """HTTP client for the catalog API.

    Example usage:
        client = StorefrontClient("http://localhost:8000")
        response = await client.list_products(category=2, sort="top-rated")
        if response.success:
            products = response.data["products"]
        await client.close()
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the API client.

        Args:
            base_url: Catalog API base URL.
            timeout: Request timeout in seconds.
            transport: Optional transport (e.g. an ASGI app in tests).
        """
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.client_timeout_seconds
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
                headers={"Accept": "application/json"},
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _get(self, path: str, params: dict[str, Any] | None = None) -> APIResponse:
        """GET a catalog endpoint.

        None-valued params are left out of the query string. Timeouts,
        connection failures and error statuses all come back as a failed
        APIResponse.
        """
        client = await self._get_client()
        query = {k: v for k, v in (params or {}).items() if v is not None}

        try:
            response = await client.get(path, params=query)
        except httpx.TimeoutException as e:
            logger.warning("Catalog API timed out", path=path, error=str(e))
            return failure("TIMEOUT", f"Request timed out: {path}", 504)
        except httpx.RequestError as e:
            logger.warning("Catalog API unreachable", path=path, error=str(e))
            return failure("REQUEST_ERROR", f"Request failed: {e}", 503)

        if response.is_error:
            try:
                body = response.json()
            except ValueError:
                body = {}
            return failure(
                body.get("error_code", "UNKNOWN_ERROR"),
                body.get("message", response.reason_phrase),
                response.status_code,
                body.get("details", []),
            )

        return APIResponse(success=True, data=response.json())

    # =========================================================================
    # Catalog Endpoints
    # =========================================================================

    async def list_products(
        self,
        category: int | None = None,
        min_price: float | None = None,
        max_price: float | None = None,
        min_rating: float | None = None,
        search: str | None = None,
        in_stock: bool | None = None,
        sort: str | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> APIResponse:
        """Get one page of the filtered catalog."""
        return await self._get(
            "/products",
            params={
                "category": category,
                "minPrice": min_price,
                "maxPrice": max_price,
                "minRating": min_rating,
                "search": search,
                "inStock": "true" if in_stock else None,
                "sort": sort,
                "page": page,
                "limit": limit,
            },
        )

    async def featured_products(self, filter_type: str, limit: int | None = None) -> APIResponse:
        """Get a featured product list."""
        return await self._get(
            "/products/featured",
            params={"filterType": filter_type, "limit": limit},
        )

    async def list_categories(self) -> APIResponse:
        """Get all categories."""
        return await self._get("/categories")

    async def get_category(
        self,
        category_id: int,
        page: int | None = None,
        limit: int | None = None,
    ) -> APIResponse:
        """Get a category with a page of its products."""
        return await self._get(
            f"/categories/{category_id}",
            params={"page": page, "limit": limit},
        )
