# promptvault/services/retention/__init__.py
"""
Version retention for prompt histories.

Every prompt keeps at most `version_cleanup_threshold` versions (default
200). Cleanup runs after each new version and removes the oldest first.

Services:
- cleanup_service: threshold lookup and oldest-first pruning
"""

from promptvault.services.retention.cleanup_service import (
    cleanup_old_versions,
    get_cleanup_threshold,
    parse_threshold,
    set_cleanup_threshold,
)

__all__ = [
    "cleanup_old_versions",
    "get_cleanup_threshold",
    "parse_threshold",
    "set_cleanup_threshold",
]
