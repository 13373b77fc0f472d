"""Route httpx requests into DRF's test client.

Lets the storefront clients talk to the real API views inside a test case
without a running server.
"""

import httpx
from rest_framework.test import APIClient


def api_transport(api_client: APIClient | None = None) -> httpx.MockTransport:
    api_client = api_client or APIClient()

    def handler(request: httpx.Request) -> httpx.Response:
        path = request.url.path
        query = request.url.query.decode()
        extra = {}
        if "Authorization" in request.headers:
            extra["HTTP_AUTHORIZATION"] = request.headers["Authorization"]
        if request.content:
            extra["data"] = request.content
            extra["content_type"] = "application/json"

        method = getattr(api_client, request.method.lower())
        response = method(f"{path}?{query}" if query else path, **extra)
        return httpx.Response(
            response.status_code,
            content=response.content,
            headers={"Content-Type": response.headers.get("Content-Type", "application/json")},
        )

    return httpx.MockTransport(handler)


def api_http_client(api_client: APIClient | None = None) -> httpx.Client:
    return httpx.Client(base_url="http://testserver", transport=api_transport(api_client))
