"""Facade for the unit conversion engine."""

from __future__ import annotations

from functools import lru_cache
from typing import Dict, List

from . import converter as _converter
from .catalog import Catalog, ConversionDescriptor, DescriptorKind, Unit, build_catalog
from .converter import ConversionRequest, ConversionResult
from .definitions import CATALOG_VERSION
from .errors import (
    CatalogInitError,
    ConversionError,
    InvalidValueError,
    UnknownCategoryError,
    UnknownUnitError,
)
from .formatter import format_value
from .validator import validate


@lru_cache(maxsize=1)
def get_catalog() -> Catalog:
    """Return the process-wide catalog, building it on first use."""

    return build_catalog()


def list_categories() -> List[str]:
    """Return category names in definition order."""

    return get_catalog().list_categories()


def list_units(category: str) -> List[Dict[str, str]]:
    """Return ``name``/``abbreviation`` pairs for the units of ``category``."""

    return [unit.to_dict() for unit in get_catalog().list_units(category)]


def list_unit_names(category: str) -> List[str]:
    return [unit.name for unit in get_catalog().list_units(category)]


def convert(value: float, category: str, from_unit: str, to_unit: str) -> float:
    """Convert ``value`` between two units of ``category`` using the shared catalog."""

    return _converter.convert(get_catalog(), value, category, from_unit, to_unit)


def convert_request(request: ConversionRequest) -> ConversionResult:
    return _converter.convert_request(get_catalog(), request)


def convert_text(raw: str, category: str, from_unit: str, to_unit: str) -> ConversionResult:
    """Validate, convert and format raw user text in one step.

    Text rejected by :func:`validate` raises :class:`InvalidValueError`.
    """

    if not validate(raw):
        raise InvalidValueError(f"Invalid numeric input {raw!r}.")
    request = ConversionRequest(
        category=category, from_unit=from_unit, to_unit=to_unit, value=float(raw)
    )
    return convert_request(request)


__all__ = [
    "CATALOG_VERSION",
    "Catalog",
    "CatalogInitError",
    "ConversionDescriptor",
    "ConversionError",
    "ConversionRequest",
    "ConversionResult",
    "DescriptorKind",
    "InvalidValueError",
    "Unit",
    "UnknownCategoryError",
    "UnknownUnitError",
    "build_catalog",
    "convert",
    "convert_request",
    "convert_text",
    "format_value",
    "get_catalog",
    "list_categories",
    "list_unit_names",
    "list_units",
    "validate",
]
