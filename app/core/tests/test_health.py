"""Tests for health check endpoints."""

import pytest


@pytest.mark.asyncio
async def test_health_check_returns_ok(client):
    """Health endpoint should return status ok."""
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


@pytest.mark.asyncio
async def test_readiness_with_database_up(client):
    response = await client.get("/health/ready")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database": "connected"}


@pytest.mark.asyncio
async def test_readiness_with_database_down(client, fake_database):
    """Readiness should report the database as disconnected, not raise."""
    fake_database.healthy = False

    response = await client.get("/health/ready")

    assert response.status_code == 200
    assert response.json() == {"status": "unhealthy", "database": "disconnected"}
