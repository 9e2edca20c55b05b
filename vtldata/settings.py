"""Environment-driven configuration for vtldata."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(slots=True)
class Settings:
    """Runtime settings loaded from environment variables."""

    catalog_path: Path
    encoding: str
    strict: bool
    log_level: str

    @classmethod
    def load(cls) -> "Settings":
        """Load settings from environment variables with sensible defaults."""

        catalog_path = Path(os.getenv("VTLDATA_CATALOG", "config/datasets.yaml"))
        encoding = os.getenv("VTLDATA_ENCODING", "utf-8")
        strict = os.getenv("VTLDATA_STRICT", "0").strip().lower() in _TRUE_VALUES
        log_level = os.getenv("LOG_LEVEL", "INFO")
        return cls(
            catalog_path=catalog_path,
            encoding=encoding,
            strict=strict,
            log_level=log_level,
        )
