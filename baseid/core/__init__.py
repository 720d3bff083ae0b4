"""
Core utilities shared across the Base ID service.

This package hosts configuration helpers (env vars, database URL, bind
address) and the logging setup used by the app and the operator scripts.
"""
