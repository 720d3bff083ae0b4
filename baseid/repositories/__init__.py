"""
Persistence adapters.

Services depend on the repository instead of issuing SQL themselves.
"""
