import httpx
import pytest

from nutri.api.api_run import app


@pytest.mark.asyncio
async def test_estimate_over_asgi():
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.post("/api/nutrition/estimate", json={
            "lines": [{"qty": "200", "unit": "", "item": "flour"}],
            "servings": "",
        })
    assert resp.status_code == 200
    data = resp.json()
    assert data["servings"] == 1
    assert data["per_serving"]["calories"] == 728.0
    assert data["lines"][0]["grams"] == 200


@pytest.mark.asyncio
async def test_health_over_asgi():
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/health")
    assert resp.json()["status"] == "ok"
