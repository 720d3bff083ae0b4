"""
Use cases for the Base ID API.

Routers call these services instead of touching the repository directly.
"""
