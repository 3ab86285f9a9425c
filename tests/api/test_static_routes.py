from __future__ import annotations

from fastapi.testclient import TestClient

from api import main
from api.main import create_app
from domain.routes import Route, RouteTable
from infrastructure.config.settings import Settings
from tests.fakes import FakeLogger


def _client() -> TestClient:
    return TestClient(create_app(logger=FakeLogger()))


def test_root_returns_hello_world() -> None:
    response = _client().get("/")

    assert response.status_code == 200
    assert response.text == "Hello World"
    assert response.headers["content-type"].startswith("text/plain")


def test_about_returns_about_page() -> None:
    response = _client().get("/about")

    assert response.status_code == 200
    assert response.text == "This is about page"


def test_unknown_path_is_not_found() -> None:
    response = _client().get("/unknown")

    assert response.status_code == 404


def test_docs_routes_are_disabled() -> None:
    client = _client()

    for path in ("/docs", "/redoc", "/openapi.json"):
        assert client.get(path).status_code == 404


def test_other_method_on_known_path_is_rejected() -> None:
    response = _client().post("/")

    assert response.status_code == 405


def test_startup_logs_readiness() -> None:
    logger = FakeLogger()
    app = create_app(settings=Settings(port=3000), logger=logger)

    with TestClient(app):
        pass

    ready = [e for e in logger.events if e["type"] == "server.ready"]
    assert len(ready) == 1
    assert ready[0]["url"] == "http://localhost:3000"
    assert ready[0]["message"] == "Server is running on http://localhost:3000"
    assert ready[0]["routes"] == ["GET /", "GET /about"]


def test_custom_route_table() -> None:
    table = RouteTable(routes=(Route(method="GET", path="/health", body="ok"),))
    client = TestClient(create_app(route_table=table, logger=FakeLogger()))

    assert client.get("/health").text == "ok"
    assert client.get("/").status_code == 404


def test_module_app_serves_default_routes() -> None:
    client = TestClient(main.app)

    assert client.get("/").text == "Hello World"
    assert client.get("/about").text == "This is about page"
