"""HTTP clients for the Qimma API.

``StorefrontClient`` covers what the public storefront needs (catalog,
orders, visit requests); ``AdminClient`` adds the bearer-token admin
endpoints. Non-success responses are mapped onto the exception classes in
``storefront.exceptions``; transport failures become ``ServiceUnavailable``.
"""

import logging
from typing import Any

import httpx
from django.conf import settings

from .exceptions import (
    NotFound,
    RateLimited,
    ServerError,
    ServiceUnavailable,
    Unauthorized,
    ValidationFailed,
)

logger = logging.getLogger(__name__)


def _get_client() -> httpx.Client:
    """Get a configured httpx client."""
    return httpx.Client(
        base_url=settings.STOREFRONT_API_URL,
        timeout=settings.STOREFRONT_API_TIMEOUT,
    )


def _error_detail(response: httpx.Response) -> str | None:
    try:
        data = response.json()
    except ValueError:
        return None
    if isinstance(data, dict):
        detail = data.get("detail")
        return str(detail) if detail else None
    return None


def _handle_response(response: httpx.Response) -> Any:
    """Return the decoded body of a 2xx response, raise for anything else."""
    if response.is_success:
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    detail = _error_detail(response)
    code = response.status_code
    if code == 400:
        raise ValidationFailed(detail, status_code=code)
    if code in (401, 403):
        raise Unauthorized(detail, status_code=code)
    if code == 404:
        raise NotFound(detail, status_code=code)
    if code == 429:
        raise RateLimited(detail, status_code=code)
    logger.error("Qimma API returned %s for %s %s", code, response.request.method, response.request.url)
    raise ServerError(status_code=code)


class StorefrontClient:
    """Public API client. Pass ``http_client`` to reuse or mock a transport."""

    def __init__(self, http_client: httpx.Client | None = None):
        self._http = http_client or _get_client()

    def close(self) -> None:
        self._http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def _headers(self) -> dict:
        return {"Accept": "application/json"}

    def _request(self, method: str, path: str, **kwargs) -> Any:
        try:
            response = self._http.request(method, path, headers=self._headers(), **kwargs)
        except httpx.RequestError as e:
            logger.error("Qimma API unavailable: %s", e)
            raise ServiceUnavailable() from e
        return _handle_response(response)

    # ---- catalog ----

    def list_categories(self) -> list[dict]:
        return self._request("GET", "/api/categories/")

    def list_products(
        self,
        category: int | None = None,
        material_type: str | None = None,
        search: str | None = None,
        featured: bool = False,
        ordering: str | None = None,
    ) -> list[dict]:
        params: dict[str, Any] = {}
        if category is not None:
            params["category"] = category
        if material_type:
            params["material_type"] = material_type
        if search:
            params["search"] = search
        if featured:
            params["featured"] = "true"
        if ordering:
            params["ordering"] = ordering
        return self._request("GET", "/api/products/", params=params)

    def get_product(self, product_id: int) -> dict:
        return self._request("GET", f"/api/products/{product_id}/")

    # ---- submissions ----

    def create_order(self, payload: dict) -> dict:
        return self._request("POST", "/api/orders/", json=payload)

    def create_visit_request(self, payload: dict) -> dict:
        return self._request("POST", "/api/visit-requests/", json=payload)


class AdminClient(StorefrontClient):
    """
    Admin API client holding the bearer token from ``login``.
    Any 401 drops the token so the caller sends the user back to login.
    """

    def __init__(self, http_client: httpx.Client | None = None, token: str | None = None):
        super().__init__(http_client)
        self.token = token

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    def _headers(self) -> dict:
        headers = super()._headers()
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _request(self, method, path, **kwargs):
        try:
            return super()._request(method, path, **kwargs)
        except Unauthorized:
            self.token = None
            raise

    def login(self, email: str, password: str) -> dict:
        data = self._request("POST", "/api/admin/login/", json={"email": email, "password": password})
        self.token = data["token"]
        return data

    def logout(self) -> None:
        """Tokens are stateless; logging out only forgets ours."""
        self.token = None

    def stats(self) -> dict:
        return self._request("GET", "/api/admin/stats/")

    def list_orders(self, status: str | None = None) -> list[dict]:
        params = {"status": status} if status else {}
        return self._request("GET", "/api/admin/orders/", params=params)

    def get_order(self, order_id: int) -> dict:
        return self._request("GET", f"/api/admin/orders/{order_id}/")

    def update_order_status(self, order_id: int, status: str) -> dict:
        return self._request("PATCH", f"/api/admin/orders/{order_id}/", json={"status": status})

    def list_visit_requests(self, status: str | None = None) -> list[dict]:
        params = {"status": status} if status else {}
        return self._request("GET", "/api/admin/visit-requests/", params=params)

    def update_visit_request_status(self, request_id: int, status: str) -> dict:
        return self._request(
            "PATCH", f"/api/admin/visit-requests/{request_id}/", json={"status": status}
        )
