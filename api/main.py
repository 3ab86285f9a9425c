"""FastAPI application serving static text routes"""
from contextlib import asynccontextmanager
from typing import Callable, Optional

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from application.ports.logger import LoggerPort
from domain.routes import Route, RouteTable
from infrastructure.config.settings import Settings
from infrastructure.logging.loguru_logger import LoguruLogger


def _static_endpoint(route: Route) -> Callable[[], PlainTextResponse]:
    def endpoint() -> PlainTextResponse:
        return PlainTextResponse(route.body, status_code=route.status)

    endpoint.__name__ = f"static_{route.method.lower()}_{route.path.strip('/') or 'root'}"
    return endpoint


def create_app(
    route_table: Optional[RouteTable] = None,
    settings: Optional[Settings] = None,
    logger: Optional[LoggerPort] = None,
) -> FastAPI:
    """
    Build the application serving every route in ``route_table``.

    Unknown paths fall through to FastAPI's default 404, known paths with
    another method to its 405.
    """
    route_table = route_table or RouteTable.default()
    settings = settings or Settings()
    logger = logger or LoguruLogger()

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        logger.info(
            "server.ready",
            url=settings.public_url,
            message=f"Server is running on {settings.public_url}",
            routes=[f"{r.method} {r.path}" for r in route_table],
        )
        yield

    # docs/openapi are disabled so that only the static routes answer
    app = FastAPI(
        title="Essentials Static Router",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )

    for route in route_table:
        app.add_api_route(
            route.path,
            _static_endpoint(route),
            methods=[route.method.upper()],
            response_class=PlainTextResponse,
        )
    return app


app = create_app(settings=Settings.from_env())
