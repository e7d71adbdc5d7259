"""Exceptions raised by the unit conversion engine."""

from __future__ import annotations


class ConversionError(Exception):
    """Base exception for conversion failures."""


class UnknownCategoryError(ConversionError, LookupError):
    """Raised when a category name is not registered in the catalog."""

    def __init__(self, category: str):
        super().__init__(f"Unknown unit category '{category}'.")
        self.category = category


class UnknownUnitError(ConversionError, LookupError):
    """Raised when a unit name is not a member of the requested category."""

    def __init__(self, category: str, unit: str):
        super().__init__(f"Unknown unit '{unit}' for category '{category}'.")
        self.category = category
        self.unit = unit


class InvalidValueError(ConversionError, ValueError):
    """Raised when a value cannot take part in a conversion."""


class CatalogInitError(RuntimeError):
    """Raised when the static catalog definition table is malformed."""


__all__ = [
    "ConversionError",
    "UnknownCategoryError",
    "UnknownUnitError",
    "InvalidValueError",
    "CatalogInitError",
]
