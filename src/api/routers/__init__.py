"""
API Routers Package

Contains all FastAPI routers grouped by functionality.

Architecture Notes:
    - Part of API Layer (Presentation)
    - Routers are thin wrappers around Application Layer use cases
    - All routers follow dependency injection pattern (src/api/dependencies.py)

Available Routers:
    - applications_router: POST /api/apply
    - tasks_router: POST /api/cohort, POST /api/payment-method
    - guarantee_router: POST /api/guarantee-sign
    - debug_router: GET /debug/options
"""

from .applications import router as applications_router
from .debug import router as debug_router
from .guarantee import router as guarantee_router
from .tasks import router as tasks_router

__all__ = ["applications_router", "debug_router", "guarantee_router", "tasks_router"]
