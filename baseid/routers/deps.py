"""Shared router dependencies."""
from __future__ import annotations

from fastapi import Request

from baseid.services.did_service import DidService


class StoreNotReadyError(RuntimeError):
    """Raised when a data route is hit before the store finished initializing."""


def get_did_service(request: Request) -> DidService:
    state = getattr(request.app, "state", None)
    if not getattr(state, "store_ready", False):
        raise StoreNotReadyError("store not initialized")
    svc = getattr(state, "did_service", None)
    if not svc:
        raise RuntimeError("DidService not configured")
    return svc
