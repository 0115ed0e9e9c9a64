"""Endpoints API router."""

from fastapi import APIRouter, Depends, Request
from loguru import logger

from mywebapi.applications.api.auth import get_current_user
from mywebapi.applications.api.dependencies import get_endpoint_explorer
from mywebapi.applications.api.schemas import EndpointResponse
from mywebapi.models.user import AuthUser
from mywebapi.services.endpoint_explorer import EndpointExplorer

router = APIRouter(prefix="/endpoints", tags=["endpoints"])


@router.get("/", response_model=list[EndpointResponse])
def list_endpoints(
    request: Request,
    user: AuthUser = Depends(get_current_user),
    explorer: EndpointExplorer = Depends(get_endpoint_explorer),
) -> list[EndpointResponse]:
    logger.info(f"[{user}] Listing endpoints")
    return [
        EndpointResponse(
            path=e.path,
            methods=list(e.methods),
            name=e.name,
            summary=e.summary,
            tags=list(e.tags),
            in_schema=e.in_schema,
        )
        for e in explorer.describe(request.app)
    ]
