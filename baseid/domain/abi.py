"""ABI tuple encoding for lookup responses.

A response is the tuple ``(uint16 status, bytes payload, string text)``
laid out with the standard head/tail ABI rules: the head holds the status
word and the offsets of the two dynamic fields, the tail holds each
dynamic field as a length word followed by zero-padded content.
"""
from __future__ import annotations

from eth_abi import decode, encode
from eth_utils import encode_hex, is_0x_prefixed, is_hex, to_bytes

RESPONSE_TYPES = ("uint16", "bytes", "string")

STATUS_FOUND = 200
STATUS_NOT_FOUND = 404
NOT_FOUND_MESSAGE = "Base ID not found"
NOT_FOUND_PLACEHOLDER = "empty"


def encode_response(status: int, payload: bytes, text: str) -> bytes:
    """Encode ``(status, payload, text)`` as an ABI ``(uint16,bytes,string)`` tuple."""
    return encode(list(RESPONSE_TYPES), [status, payload, text])


def decode_response(data: bytes) -> tuple[int, bytes, str]:
    status, payload, text = decode(list(RESPONSE_TYPES), data)
    return status, payload, text


def not_found_response() -> bytes:
    return encode_response(STATUS_NOT_FOUND, NOT_FOUND_MESSAGE.encode("utf-8"), NOT_FOUND_PLACEHOLDER)


def signature_bytes(signature: str) -> bytes:
    """Raw bytes of a stored signature.

    Signatures are normally ``0x``-prefixed hex; those are decoded. Anything
    else is stored verbatim, so its UTF-8 bytes are used.
    """
    value = signature or ""
    if is_0x_prefixed(value) and is_hex(value):
        return to_bytes(hexstr=value)
    return value.encode("utf-8")


def to_hex(data: bytes) -> str:
    return encode_hex(data)
