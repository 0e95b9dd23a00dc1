from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class CatalogConfig:
    catalog_path: Path = Path(__file__).resolve().parent / "data" / "techniques.json"


DEFAULT_CATALOG_CONFIG = CatalogConfig()
