from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

_DEFAULT_CATALOG = Path(__file__).resolve().parent / "data" / "dishes.csv"


@dataclass(frozen=True)
class AppConfig:
    catalog_path: Path = field(
        default_factory=lambda: Path(os.getenv("CUISINE_CATALOG_PATH", str(_DEFAULT_CATALOG)))
    )
    log_level: str = field(default_factory=lambda: os.getenv("CUISINE_LOG_LEVEL", "INFO"))


DEFAULT_APP_CONFIG = AppConfig()
