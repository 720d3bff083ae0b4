#!/usr/bin/env python3
"""
Register a DID record directly in the database.

Usage:
  python scripts/add_did.py --address 0xAbC... --document '{"name": "..."}' --signature 0x...
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Make the baseid package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from baseid.db.create_tables import init_store  # noqa: E402
from baseid.repositories.did_repository import DidRepository  # noqa: E402
from baseid.services.did_service import DidService, MissingFieldsError  # noqa: E402


def main() -> None:
    ap = argparse.ArgumentParser(description="Register a DID record")
    ap.add_argument("--address", required=True, help="Identifier (stored lowercase)")
    ap.add_argument("--document", required=True, help="Document contents")
    ap.add_argument("--signature", required=True, help="Signature, usually 0x-prefixed hex")
    args = ap.parse_args()

    init_store()
    repo = DidRepository()
    svc = DidService(repo)
    try:
        svc.register({"address": args.address, "document": args.document, "signature": args.signature})
    except MissingFieldsError as exc:
        raise SystemExit(f"Invalid record: {exc}")
    address = args.address.lower()
    print("OK: record stored")
    print(f"  Address: {address}")
    print(f"  Rows for address: {repo.count(address)}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
