# promptvault/routers/__init__.py
"""
API routers for v1 endpoints.
"""

from promptvault.routers.catalog import router as catalog_router
from promptvault.routers.prompts import router as prompts_router
from promptvault.routers.settings import router as settings_router
from promptvault.routers.transfer import router as transfer_router

__all__ = [
    "prompts_router",
    "catalog_router",
    "transfer_router",
    "settings_router",
]
