"""Error Envelope — every failure path returns {"error": {...}}.

Invariants:
    - Unknown routes → 404 envelope
    - Wrong method → 405 envelope
    - Unexpected exceptions → 500 envelope without internal details
"""

from httpx import ASGITransport, AsyncClient

from bookshelf.api.routes.books import get_book_repository
from bookshelf.main import app


async def test_unknown_route_is_404_envelope(client):
    res = await client.get("/authors")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "HTTP_404"


async def test_wrong_method_is_405_envelope(client):
    res = await client.patch("/books")
    assert res.status_code == 405
    assert res.json()["error"]["code"] == "HTTP_405"


async def test_unexpected_error_is_500_without_details():
    class _ExplodingRepository:
        async def list_all(self):
            raise RuntimeError("connection string leaked here")

    app.dependency_overrides[get_book_repository] = lambda: _ExplodingRepository()
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app, raise_app_exceptions=False),
            base_url="http://test",
        ) as c:
            res = await c.get("/books")
    finally:
        app.dependency_overrides.clear()

    assert res.status_code == 500
    error = res.json()["error"]
    assert error["code"] == "INTERNAL_ERROR"
    assert "leaked" not in error["message"]
