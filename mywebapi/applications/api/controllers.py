"""Registry of controller routers mounted behind the authorization gate."""

from collections.abc import Sequence
from typing import Any

from fastapi import APIRouter, FastAPI
from fastapi.params import Depends


class ControllerRegistry:
    def __init__(self) -> None:
        self._routers: list[APIRouter] = []

    def __contains__(self, router: object) -> bool:
        return any(r is router for r in self._routers)

    @property
    def routers(self) -> list[APIRouter]:
        return list(self._routers)

    def register(self, router: APIRouter) -> APIRouter:
        if router in self:
            raise ValueError(f"Router {router.prefix or '/'} is already registered")
        self._routers.append(router)
        return router

    def map_controllers(
        self,
        app: FastAPI,
        prefix: str = "",
        dependencies: Sequence[Depends] | None = None,
    ) -> None:
        """Include every registered router in ``app``.

        ``dependencies`` run before each controller endpoint; this is where
        the authorization gate is attached.
        """
        extra: dict[str, Any] = {"dependencies": list(dependencies or [])}
        for router in self._routers:
            app.include_router(router, prefix=prefix, **extra)
