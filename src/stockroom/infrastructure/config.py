"""Runtime settings read from the environment.

CLI options take precedence; see ``stockroom.infrastructure.cli.main``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from stockroom.infrastructure.persistence.json_product_repository import DEFAULT_SLOT

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """Typed view of the STOCKROOM_* environment variables."""

    data_dir: Path
    slot: str
    log_level: str


def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    log_level = (os.getenv("STOCKROOM_LOG_LEVEL") or "WARNING").upper()
    if log_level not in LOG_LEVELS:
        log_level = "WARNING"

    return Settings(
        data_dir=Path(os.getenv("STOCKROOM_DATA_DIR") or DEFAULT_DATA_DIR),
        slot=os.getenv("STOCKROOM_SLOT") or DEFAULT_SLOT,
        log_level=log_level,
    )
