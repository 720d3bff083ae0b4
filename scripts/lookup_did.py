#!/usr/bin/env python3
"""
Print the decoded lookup response for an id, as GET /{id} would encode it.

Usage:
  python scripts/lookup_did.py 0xabc... [--hex]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from baseid.domain.abi import decode_response, to_hex  # noqa: E402
from baseid.services.did_service import DidService  # noqa: E402


def main() -> None:
    ap = argparse.ArgumentParser(description="Look up a DID record")
    ap.add_argument("address", help="Identifier (case-insensitive)")
    ap.add_argument("--hex", action="store_true", help="Also print the raw encoded response")
    args = ap.parse_args()

    encoded = DidService().resolve(args.address)
    status, payload, text = decode_response(encoded)
    print(f"status:   {status}")
    print(f"payload:  {to_hex(payload)}")
    print(f"text:     {text}")
    if args.hex:
        print(f"encoded:  {to_hex(encoded)}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
