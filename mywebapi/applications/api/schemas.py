"""API request/response schemas."""

from pydantic import BaseModel, Field

from mywebapi.models.user import UserRole


class UserResponse(BaseModel):
    """API user as seen by clients; credentials are never exposed."""

    username: str
    role: UserRole


class EndpointResponse(BaseModel):
    """Metadata of a single registered endpoint."""

    path: str
    methods: list[str]
    name: str
    summary: str | None = None
    tags: list[str] = Field(default_factory=list)
    in_schema: bool = True


class HealthResponse(BaseModel):
    status: str


class UserCreateRequest(BaseModel):
    """Request body for creating a new API user."""

    username: str
    password: str
    role: UserRole = UserRole.VIEWER


class MessageResponse(BaseModel):
    """Generic message response."""

    message: str
    success: bool = True
