from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .config import DEFAULT_CATALOG_CONFIG
from .models import TechniqueDefinition

logger = logging.getLogger(__name__)

_catalog: tuple[TechniqueDefinition, ...] | None = None
_by_slug: dict[str, TechniqueDefinition] = {}


class CatalogError(ValueError):
    """Raised when the technique catalog is missing or malformed."""


def slugify(name: str) -> str:
    """Derive a URL-safe slug, e.g. ``"A/B Testing"`` -> ``"a-b-testing"``."""
    return re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")


def _parse_record(index: int, record: Any) -> TechniqueDefinition:
    if not isinstance(record, dict):
        raise CatalogError(f"Catalog entry #{index} is not an object")
    data = dict(record)
    if not data.get("slug") and data.get("name"):
        data["slug"] = slugify(str(data["name"]))
    try:
        return TechniqueDefinition.model_validate(data)
    except ValidationError as exc:
        label = data.get("name") or f"#{index}"
        raise CatalogError(f"Invalid catalog entry {label!r}: {exc}") from exc


def load_catalog(path: Path) -> tuple[TechniqueDefinition, ...]:
    """
    Read and validate a JSON technique catalog.

    Every record must carry ``name`` and ``stage``; missing tag lists mean
    "no restriction". Slugs must be unique. Duplicate names are allowed but
    logged, since the engine keeps only the first one per stage.
    """
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise CatalogError(f"Could not read technique catalog at {path}: {exc}") from exc

    if not isinstance(raw, list):
        raise CatalogError("Technique catalog must be a JSON array")

    techniques = tuple(_parse_record(i, rec) for i, rec in enumerate(raw))

    seen_slugs: set[str] = set()
    seen_names: set[str] = set()
    for tech in techniques:
        if tech.slug in seen_slugs:
            raise CatalogError(f"Duplicate technique slug {tech.slug!r}")
        seen_slugs.add(tech.slug)
        if tech.name in seen_names:
            logger.warning("Duplicate technique name %r in catalog; only the first is recommended", tech.name)
        seen_names.add(tech.name)

    logger.info("Loaded %d techniques from %s", len(techniques), path)
    return techniques


def get_catalog() -> tuple[TechniqueDefinition, ...]:
    """Return the bundled technique catalog, loading it on first call."""
    global _catalog, _by_slug
    if _catalog is None:
        _catalog = load_catalog(DEFAULT_CATALOG_CONFIG.catalog_path)
        _by_slug = {t.slug: t for t in _catalog}
    return _catalog


def find_technique(slug: str) -> TechniqueDefinition | None:
    get_catalog()
    return _by_slug.get(slug)
