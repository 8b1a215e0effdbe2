# promptvault/services/__init__.py
"""
Store services.
"""

from promptvault.services.rollback_service import RollbackResult, rollback_to_version
from promptvault.services.search_service import SearchService

__all__ = [
    "RollbackResult",
    "rollback_to_version",
    "SearchService",
]
