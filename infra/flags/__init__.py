"""
Feature flags keyed by deployment environment.
"""

from infra.flags.registry import FLAG_REGISTRY, FeatureFlags, FlagName
from infra.flags.resolver import get_flags, is_enabled

__all__ = [
    "FLAG_REGISTRY",
    "FeatureFlags",
    "FlagName",
    "get_flags",
    "is_enabled",
]
