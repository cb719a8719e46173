"""Application configuration helpers."""

from __future__ import annotations

from .env import env_list
from .errors import ConfigurationError
from .reconciliation import (
    ReconcileConfig,
    get_reconcile_config,
    parse_policy,
    parse_sources,
)
from .storage import StorageConfig, get_storage_config

__all__ = [
    "ConfigurationError",
    "ReconcileConfig",
    "StorageConfig",
    "env_list",
    "get_reconcile_config",
    "get_storage_config",
    "parse_policy",
    "parse_sources",
]
