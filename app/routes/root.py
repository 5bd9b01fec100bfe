"""
Boruto Api — Root Route
=======================

What:  Plain-text welcome message at the API root.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Root"])

WELCOME_MESSAGE = "Welcome to Boruto Api"


@router.get("/", response_class=PlainTextResponse, summary="Welcome message")
async def root() -> str:
    return WELCOME_MESSAGE
