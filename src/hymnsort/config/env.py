"""Environment variable loaders for configuration."""

from __future__ import annotations

import os


def env_list(name: str) -> list[str] | None:
    """Split a comma-separated variable; ``None`` when unset or blank."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return [item.strip() for item in value.split(",") if item.strip()]
