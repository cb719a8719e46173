"""Data storage configuration helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

APP_DIR_NAME: Final[str] = "hymnsort"
RECONCILED_FILENAME: Final[str] = "reconciled.json"
ERROR_REPORT_FILENAME: Final[str] = "errors.json"
DUPLICATES_FILENAME: Final[str] = "duplicates.json"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    data_dir: Path
    reconciled_filename: str = RECONCILED_FILENAME
    error_report_filename: str = ERROR_REPORT_FILENAME
    duplicates_filename: str = DUPLICATES_FILENAME

    def resolve_data_dir(self) -> Path:
        return self.data_dir.expanduser().resolve()

    def ensure_data_dir(self) -> Path:
        data_dir = self.resolve_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def reconciled_path(self, *, ensure: bool = True) -> Path:
        return self._base(ensure=ensure) / self.reconciled_filename

    def error_report_path(self, *, ensure: bool = True) -> Path:
        return self._base(ensure=ensure) / self.error_report_filename

    def duplicates_path(self, *, ensure: bool = True) -> Path:
        return self._base(ensure=ensure) / self.duplicates_filename

    def _base(self, *, ensure: bool) -> Path:
        return self.ensure_data_dir() if ensure else self.resolve_data_dir()


def _default_data_dir() -> Path:
    if os.name == "nt":
        base = os.getenv("LOCALAPPDATA")
        base_path = Path(base) if base else (Path.home() / "AppData" / "Local")
    else:
        base = os.getenv("XDG_DATA_HOME")
        base_path = Path(base) if base else (Path.home() / ".local" / "share")
    return (base_path / APP_DIR_NAME).expanduser().resolve()


def get_storage_config() -> StorageConfig:
    env_dir = os.getenv("HYMNSORT_DATA_DIR")
    data_dir = Path(env_dir) if env_dir else _default_data_dir()
    return StorageConfig(data_dir=data_dir)
