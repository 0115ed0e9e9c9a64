"""Routes around the interactive API documentation."""

from fastapi import APIRouter
from fastapi.responses import RedirectResponse

DOCS_URL = "/swagger"
OAUTH2_REDIRECT_URL = f"{DOCS_URL}/oauth2-redirect"

router = APIRouter(include_in_schema=False)


@router.get("/")
def redirect_to_docs() -> RedirectResponse:
    return RedirectResponse(DOCS_URL, status_code=302)
