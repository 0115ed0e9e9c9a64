"""FastAPI application for the web API host."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.middleware.httpsredirect import HTTPSRedirectMiddleware
from starlette.requests import Request

from mywebapi.applications.api import docs
from mywebapi.applications.api.auth import get_current_user
from mywebapi.applications.api.routers import endpoints, users
from mywebapi.applications.api.schemas import HealthResponse
from mywebapi.dependencies import Container
from mywebapi.exceptions import (
    DuplicateUserException,
    MalformedUserException,
    UserNotFoundException,
    UserStoreException,
)


def create_app(container: Container) -> FastAPI:
    """Build a FastAPI instance with services from the given DI container."""
    config = container.config
    schema_generator = container.schema_generator()
    https_redirect: bool = config.https_redirect()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            f"Starting {app.title} {app.version}: "
            f"schema at {schema_generator.schema_url}, "
            f"https redirect {'on' if https_redirect else 'off'}"
        )
        yield
        logger.info(f"Shutting down {app.title}")

    app = FastAPI(
        title=schema_generator.title,
        description=schema_generator.description,
        version=schema_generator.version,
        openapi_url=schema_generator.schema_url,
        docs_url=docs.DOCS_URL,
        redoc_url=None,
        swagger_ui_oauth2_redirect_url=docs.OAUTH2_REDIRECT_URL,
        lifespan=lifespan,
    )
    schema_generator.bind(app)

    app.state.user_service = container.user_service()
    app.state.endpoint_explorer = container.endpoint_explorer()

    if https_redirect:
        app.add_middleware(HTTPSRedirectMiddleware)

    @app.exception_handler(UserNotFoundException)
    async def not_found_handler(
        request: Request, exc: UserNotFoundException
    ) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(MalformedUserException)
    async def malformed_handler(
        request: Request, exc: MalformedUserException
    ) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.exception_handler(DuplicateUserException)
    async def duplicate_handler(
        request: Request, exc: DuplicateUserException
    ) -> JSONResponse:
        return JSONResponse(status_code=409, content={"detail": str(exc)})

    @app.exception_handler(UserStoreException)
    async def store_handler(
        request: Request, exc: UserStoreException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=503, content={"detail": "User store unavailable"}
        )

    app.include_router(docs.router)

    @app.get("/health", response_model=HealthResponse)
    def health() -> HealthResponse:
        return HealthResponse(status="ok")

    registry = container.controller_registry()
    for router in (endpoints.router, users.router):
        if router not in registry:
            registry.register(router)
    registry.map_controllers(
        app,
        prefix=config.api_prefix(),
        dependencies=[Depends(get_current_user)],
    )

    return app
