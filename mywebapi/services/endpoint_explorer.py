"""Endpoint metadata for the routes of a built application."""

from dataclasses import dataclass

from fastapi import FastAPI
from fastapi.routing import APIRoute


@dataclass(frozen=True)
class EndpointDescription:
    path: str
    methods: tuple[str, ...]
    name: str
    summary: str | None
    tags: tuple[str, ...]
    in_schema: bool


class EndpointExplorer:
    """Describes the API routes registered on a FastAPI app."""

    def describe(self, app: FastAPI) -> list[EndpointDescription]:
        """Return one description per API route, sorted by path then methods.

        Non-API routes (static mounts, the docs pages) are not listed;
        API routes hidden from the schema are listed with ``in_schema=False``.
        """
        endpoints = [
            EndpointDescription(
                path=route.path,
                methods=tuple(sorted(m for m in route.methods if m != "HEAD")),
                name=route.name,
                summary=route.summary,
                tags=tuple(str(t) for t in route.tags),
                in_schema=route.include_in_schema,
            )
            for route in app.routes
            if isinstance(route, APIRoute)
        ]
        return sorted(endpoints, key=lambda e: (e.path, e.methods))
