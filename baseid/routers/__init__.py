"""
FastAPI routers for the Base ID service.

Each module exposes an APIRouter included by ``baseid.app.create_app``.
"""
