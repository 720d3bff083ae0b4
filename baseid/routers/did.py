"""Lookup and write endpoints for DID records."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
from starlette.concurrency import run_in_threadpool

from baseid.domain.abi import to_hex
from baseid.routers.deps import get_did_service
from baseid.services.did_service import DidService, StoreError, ValidationError

router = APIRouter(tags=["did"])
logger = logging.getLogger(__name__)


@router.post("/write", response_class=PlainTextResponse)
async def write_did(request: Request, service: DidService = Depends(get_did_service)):
    try:
        payload = await request.json()
    except ValueError:
        payload = None
    try:
        await run_in_threadpool(service.register, payload)
    except ValidationError as exc:
        logger.info("Rejected write: %s", exc)
        return PlainTextResponse("Missing address or document in request body", status_code=400)
    except StoreError:
        logger.exception("Error inserting into database")
        return PlainTextResponse("Error inserting into database", status_code=500)
    return PlainTextResponse("Data inserted successfully")


@router.get("/{did_id}", response_class=PlainTextResponse)
async def lookup_did(did_id: str, service: DidService = Depends(get_did_service)):
    try:
        encoded = await run_in_threadpool(service.resolve, did_id)
    except StoreError:
        logger.exception("Error querying the database")
        return PlainTextResponse("Error querying the database", status_code=500)
    return PlainTextResponse(to_hex(encoded))
