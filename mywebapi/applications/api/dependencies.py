"""FastAPI dependency getters backed by app.state."""

from fastapi import Request

from mywebapi.services.endpoint_explorer import EndpointExplorer
from mywebapi.services.user_service import UserService


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service


def get_endpoint_explorer(request: Request) -> EndpointExplorer:
    return request.app.state.endpoint_explorer
