"""
API V1 Endpoints Package
Exports routers used by main app
"""
from .applications import router as applications_router
from .jobs import router as jobs_router
from .partners import router as partners_router
from .admin import router as admin_router

__all__ = [
    "applications_router",
    "jobs_router",
    "partners_router",
    "admin_router"
]
