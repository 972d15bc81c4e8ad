"""Landing page.  Not part of the CRUD surface; useful as a liveness check."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()

BANNER = "Pokemon Team API - Try GET /pokemon"


@router.get("/", response_class=PlainTextResponse)
def root() -> str:
    return BANNER
