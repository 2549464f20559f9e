"""Tests for request middleware."""

import pytest


@pytest.mark.asyncio
async def test_request_id_middleware_generates_id(client):
    """Middleware should generate request ID if not provided."""
    response = await client.get("/health")

    request_id = response.headers.get("X-Request-ID")
    assert request_id is not None
    assert len(request_id) == 32  # uuid4 hex


@pytest.mark.asyncio
async def test_request_id_middleware_preserves_provided_id(client):
    custom_id = "my-custom-request-id"
    response = await client.get("/health", headers={"X-Request-ID": custom_id})

    assert response.headers["X-Request-ID"] == custom_id


@pytest.mark.asyncio
async def test_request_id_middleware_different_ids_per_request(client):
    response1 = await client.get("/health")
    response2 = await client.get("/health")

    assert response1.headers["X-Request-ID"] != response2.headers["X-Request-ID"]


@pytest.mark.asyncio
async def test_problem_response_carries_request_id(client):
    """Error bodies should reference the request that produced them."""
    response = await client.get("/listarProduto", headers={"X-Request-ID": "req-42"})

    assert response.status_code == 400
    assert response.headers["content-type"] == "application/problem+json"
    body = response.json()
    assert body["request_id"] == "req-42"
    assert body["instance"] == "/requests/req-42"
    assert body["code"] == "BAD_REQUEST"
