"""Runtime settings.

Values come from the root CLI command's options, each of which falls
back to an environment variable (``SHOPCART_DATA_DIR``,
``SHOPCART_LOG_LEVEL``, ``SHOPCART_CURRENCY``).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from shopcart.domain.model.value_objects import DEFAULT_CURRENCY

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    log_level: str = "WARNING"
    currency: str = DEFAULT_CURRENCY
