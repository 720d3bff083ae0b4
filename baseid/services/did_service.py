"""DID lookup/registration use cases."""

from __future__ import annotations

import logging
from typing import Any

from baseid.domain.abi import (
    STATUS_FOUND,
    encode_response,
    not_found_response,
    signature_bytes,
)
from baseid.repositories.did_repository import DidRepository, StoreError

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("address", "document", "signature")

__all__ = [
    "DidError",
    "DidService",
    "MissingFieldsError",
    "StoreError",
    "ValidationError",
]


class DidError(Exception):
    """Base exception for DID workflow."""


class ValidationError(DidError):
    """Raised when a write request is malformed."""


class MissingFieldsError(ValidationError):
    """Raised when address, document or signature is absent or empty."""

    def __init__(self, missing: list[str]) -> None:
        super().__init__(f"missing fields: {', '.join(missing)}")
        self.missing = missing


class DidService:
    """Resolves ids to encoded responses and registers new records."""

    def __init__(self, repository: DidRepository | None = None) -> None:
        self.repository = repository or DidRepository()

    def resolve(self, did_id: str) -> bytes:
        record = self.repository.lookup(did_id)
        if record is None:
            logger.info("Base ID not found: %s", did_id)
            return not_found_response()
        logger.info("Base ID returned: %s", record.id)
        return encode_response(STATUS_FOUND, signature_bytes(record.signature), record.document)

    def register(self, payload: Any) -> None:
        if not isinstance(payload, dict):
            raise MissingFieldsError(list(REQUIRED_FIELDS))
        missing = [
            name for name in REQUIRED_FIELDS
            if not isinstance(payload.get(name), str) or not payload.get(name)
        ]
        if missing:
            raise MissingFieldsError(missing)
        address = payload["address"].lower()
        self.repository.insert(address, payload["document"], payload["signature"])
        logger.info("Base ID created successfully: %s", address)
