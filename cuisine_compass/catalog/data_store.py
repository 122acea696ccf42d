from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

import pandas as pd
from pydantic import ValidationError

from ..config import DEFAULT_APP_CONFIG
from .models import Dish

logger = logging.getLogger(__name__)

CATALOG_COLUMNS: list[str] = [
    "id",
    "name",
    "type",
    "origin",
    "spice_level",
    "popularity",
    "meal_types",
    "event_types",
    "is_jain_friendly",
    "is_gluten_free",
    "serving_unit",
    "serving_size",
    "description",
    "category",
]

_LIST_COLUMNS = ("meal_types", "event_types")

_df: pd.DataFrame | None = None
_dishes: tuple[Dish, ...] | None = None


class CatalogError(ValueError):
    """Raised when the dish catalog file is malformed."""


def _split_list(value: str) -> frozenset[str]:
    return frozenset(v.strip().lower() for v in str(value).split(",") if v.strip())


def _load_frame(path: Path) -> pd.DataFrame:
    try:
        df = pd.read_csv(path, dtype={"id": str, "name": str, "description": str})
    except FileNotFoundError as exc:
        raise CatalogError(f"Catalog file not found: {path}") from exc

    missing = [c for c in CATALOG_COLUMNS if c not in df.columns]
    if missing:
        raise CatalogError(f"Catalog is missing columns: {', '.join(missing)}")

    duplicated = df.loc[df["id"].duplicated(), "id"].tolist()
    if duplicated:
        raise CatalogError(f"Duplicate dish ids in catalog: {', '.join(duplicated)}")

    df = df[CATALOG_COLUMNS].copy()
    df["description"] = df["description"].fillna("")
    # Pre-parse the applicability lists into sets for membership checks
    for col in _LIST_COLUMNS:
        df[col] = df[col].fillna("").apply(_split_list)
    return df


def _native(value):
    # numpy scalars -> plain Python values for validation
    return value.item() if hasattr(value, "item") else value


def dish_from_row(row: pd.Series) -> Dish:
    try:
        return Dish(**{k: _native(v) for k, v in row.items()})
    except ValidationError as exc:
        raise CatalogError(f"Invalid catalog entry {row.get('id')!r}: {exc}") from exc


def catalog_frame(dishes: Iterable[Dish]) -> pd.DataFrame:
    """
    Build the lookup frame the engine filters on.

    Enum fields become plain strings, applicability lists become sets and the
    validated Dish itself rides along in the "dish" column.
    """
    dishes = list(dishes)
    rows = [d.model_dump(mode="json") for d in dishes]
    df = pd.DataFrame(rows, columns=CATALOG_COLUMNS)
    for col in _LIST_COLUMNS:
        df[col] = df[col].apply(frozenset)
    df["dish"] = pd.Series(dishes, index=df.index, dtype=object)
    return df


def load_catalog(path: Path) -> tuple[pd.DataFrame, tuple[Dish, ...]]:
    """Read and validate a catalog CSV, returning the frame and its dishes in file order."""
    raw = _load_frame(path)
    dishes = tuple(dish_from_row(row) for _, row in raw.iterrows())
    logger.info("Loaded %d dishes from %s", len(dishes), path)
    return catalog_frame(dishes), dishes


def _ensure_loaded() -> None:
    global _df, _dishes
    if _dishes is None:
        _df, _dishes = load_catalog(DEFAULT_APP_CONFIG.catalog_path)


def get_dataframe() -> pd.DataFrame:
    """Return the in-memory catalog DataFrame, loading it on first call."""
    _ensure_loaded()
    return _df


def get_catalog() -> tuple[Dish, ...]:
    """Return the read-only dish catalog, loading it on first call."""
    _ensure_loaded()
    return _dishes


def get_dish(dish_id: str) -> Dish:
    for dish in get_catalog():
        if dish.id == dish_id:
            return dish
    raise KeyError(dish_id)


def reset_catalog() -> None:
    global _df, _dishes
    _df = None
    _dishes = None
