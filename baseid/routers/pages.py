from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

router = APIRouter(prefix="", tags=["pages"])

WELCOME_TEXT = "BA5E ID--Discover What's Possible"


@router.get("/", response_class=PlainTextResponse)
def welcome():
    return PlainTextResponse(WELCOME_TEXT)


@router.get("/healthz", response_class=PlainTextResponse)
def healthz(request: Request):
    if getattr(request.app.state, "store_ready", False):
        return PlainTextResponse("ok")
    return PlainTextResponse("starting", status_code=503)
