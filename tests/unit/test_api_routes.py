"""Tests for the FastAPI layer."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from hexpath import __version__
from hexpath.api.app import create_app
from hexpath.config import Settings

OPEN_GRID = [["s", "b", "b"], ["b", "b", "b"], ["b", "b", "e"]]


@pytest.fixture
def client():
    app = create_app(settings=Settings(cors_origins=["http://test"]))
    return TestClient(app)


def _body(grid=None, source=(0, 0), target=(2, 2)) -> dict[str, object]:
    return {
        "source": list(source),
        "target": list(target),
        "grid": grid if grid is not None else OPEN_GRID,
    }


def test_index(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "hexpath"}


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["version"] == __version__
    assert payload["supported_requests"] == ["dijkstra"]


def test_dijkstra_path(client):
    response = client.post("/api/dijkstra", json=_body())
    assert response.status_code == 200
    assert response.json() == {
        "path": ["Hex(1,2,-3)", "Hex(0,2,-2)", "Hex(0,1,-1)", "Hex(0,0,0)"]
    }


def test_no_path_is_not_an_http_error(client):
    grid = [["s", "b", "b"], ["o", "o", "o"], ["o", "o", "e"]]
    response = client.post("/api/dijkstra", json=_body(grid=grid))
    assert response.status_code == 200
    assert response.json() == {"path": ["No path found"]}


def test_invalid_character(client):
    grid = [["s", "i", "b"], ["b", "b", "b"], ["b", "b", "e"]]
    response = client.post("/api/dijkstra", json=_body(grid=grid))
    assert response.status_code == 200
    assert response.json() == {"path": ["Invalid character in graph"]}


def test_invalid_request_type(client):
    response = client.post("/api/floyd_warshall", json=_body())
    assert response.status_code == 200
    assert response.json() == {"path": ["Invalid request type"]}


@pytest.mark.parametrize(
    "body",
    [
        {"source": [0, 0], "target": [2, 2]},
        {"source": [0], "target": [2, 2], "grid": OPEN_GRID},
        {"source": [0, 0], "target": ["a", "b"], "grid": OPEN_GRID},
        {"source": [0, 0], "target": [2, 2], "grid": "sbb"},
    ],
)
def test_malformed_body_rejected(client, body):
    response = client.post("/api/dijkstra", json=body)
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_concurrent_requests_are_independent():
    app = create_app(settings=Settings())
    transport = ASGITransport(app=app)
    walled = [["s", "b", "b"], ["o", "o", "o"], ["o", "o", "e"]]

    async with AsyncClient(transport=transport, base_url="http://test") as http:
        open_response = await http.post("/api/dijkstra", json=_body())
        walled_response = await http.post("/api/dijkstra", json=_body(grid=walled))
        again = await http.post("/api/dijkstra", json=_body())

    assert walled_response.json()["path"] == ["No path found"]
    assert open_response.json() == again.json()
    assert len(again.json()["path"]) == 4
