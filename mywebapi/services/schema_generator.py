from collections.abc import Sequence
from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from starlette.routing import BaseRoute


class SchemaGenerator:
    """Builds the OpenAPI document served under ``/swagger/<name>/swagger.json``."""

    def __init__(
        self,
        title: str,
        version: str,
        description: str = "",
        document_name: str = "v1",
    ) -> None:
        self.title = title
        self.version = version
        self.description = description
        self.document_name = document_name

    @property
    def schema_url(self) -> str:
        return f"/swagger/{self.document_name}/swagger.json"

    def generate(self, routes: Sequence[BaseRoute]) -> dict[str, Any]:
        return get_openapi(
            title=self.title,
            version=self.version,
            description=self.description,
            routes=list(routes),
        )

    def bind(self, app: FastAPI) -> None:
        """Replace ``app.openapi`` with a cached call to ``generate``."""

        def openapi() -> dict[str, Any]:
            if app.openapi_schema is None:
                app.openapi_schema = self.generate(app.routes)
            return app.openapi_schema

        app.openapi = openapi  # type: ignore[method-assign]
