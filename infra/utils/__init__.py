"""
Utility functions for infrastructure code.

Provides naming conventions, tag factories, and logging setup.
"""

from infra.utils.logger import configure_logging, get_logger
from infra.utils.naming import ResourceNamer
from infra.utils.tags import create_tags, merge_tags

__all__ = [
    "configure_logging",
    "get_logger",
    "ResourceNamer",
    "create_tags",
    "merge_tags",
]
