"""Read-only registry of unit categories and their units."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from types import MappingProxyType
from typing import Iterable, List, Mapping

from common.logging import get_logger

from .definitions import (
    AFFINE,
    CATALOG_VERSION,
    CATEGORY_DEFINITIONS,
    LINEAR,
    CategoryDefinition,
    UnitDefinition,
)
from .errors import CatalogInitError, UnknownCategoryError, UnknownUnitError

logger = get_logger("catalog")


class DescriptorKind(str, Enum):
    LINEAR = "linear"
    AFFINE = "affine"


@dataclass(frozen=True, slots=True)
class ConversionDescriptor:
    """Arithmetic rule relating a unit to the base unit of its category.

    ``kind`` tags which variant is in use. Linear descriptors only carry
    ``scale`` (the factor) and keep ``offset`` at zero.
    """

    kind: DescriptorKind
    scale: Fraction
    offset: Fraction = Fraction(0)

    @classmethod
    def linear(cls, factor: Fraction) -> "ConversionDescriptor":
        return cls(DescriptorKind.LINEAR, Fraction(factor))

    @classmethod
    def affine(cls, scale: Fraction, offset: Fraction) -> "ConversionDescriptor":
        return cls(DescriptorKind.AFFINE, Fraction(scale), Fraction(offset))

    @property
    def is_identity(self) -> bool:
        return self.scale == 1 and self.offset == 0


@dataclass(frozen=True, slots=True)
class Unit:
    """A convertible quantity within one category."""

    name: str
    abbreviation: str
    descriptor: ConversionDescriptor

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "abbreviation": self.abbreviation}


@dataclass(frozen=True, eq=False)
class Category:
    """A domain of mutually convertible units."""

    name: str
    base_unit: str
    units: Mapping[str, Unit]

    @property
    def base(self) -> Unit:
        return self.units[self.base_unit]

    def unit(self, name: str) -> Unit:
        if not isinstance(name, str) or name not in self.units:
            raise UnknownUnitError(self.name, str(name))
        return self.units[name]


class Catalog:
    """Immutable view over the categories built from the definition table."""

    def __init__(self, categories: Mapping[str, Category], *, version: str) -> None:
        self._categories = MappingProxyType(dict(categories))
        self.version = version

    def __len__(self) -> int:
        return len(self._categories)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._categories

    def list_categories(self) -> List[str]:
        return list(self._categories)

    def category(self, name: str) -> Category:
        if name not in self:
            raise UnknownCategoryError(str(name))
        return self._categories[name]

    def list_units(self, category: str) -> List[Unit]:
        return list(self.category(category).units.values())

    def resolve_unit(self, category: str, unit_name: str) -> Unit:
        return self.category(category).unit(unit_name)


def _parse_coefficient(text: str, *, where: str) -> Fraction:
    try:
        return Fraction(text)
    except (TypeError, ValueError, ZeroDivisionError) as exc:
        raise CatalogInitError(f"{where}: invalid coefficient {text!r}") from exc


def _build_descriptor(row: UnitDefinition, *, where: str) -> ConversionDescriptor:
    scale = _parse_coefficient(row.scale, where=where)
    if scale == 0:
        raise CatalogInitError(f"{where}: scale factor must be nonzero")
    if row.kind == LINEAR:
        if _parse_coefficient(row.offset, where=where) != 0:
            raise CatalogInitError(f"{where}: linear units cannot carry an offset")
        return ConversionDescriptor.linear(scale)
    if row.kind == AFFINE:
        return ConversionDescriptor.affine(scale, _parse_coefficient(row.offset, where=where))
    raise CatalogInitError(f"{where}: unknown descriptor kind {row.kind!r}")


def _build_category(definition: CategoryDefinition) -> Category:
    if not definition.units:
        raise CatalogInitError(f"Category '{definition.name}' has no units")
    units: dict[str, Unit] = {}
    for row in definition.units:
        where = f"{definition.name}/{row.name}"
        if not row.name:
            raise CatalogInitError(f"Category '{definition.name}' has a unit without a name")
        if row.name in units:
            raise CatalogInitError(f"{where}: duplicate unit name")
        units[row.name] = Unit(row.name, row.abbreviation, _build_descriptor(row, where=where))
    base = units.get(definition.base)
    if base is None:
        raise CatalogInitError(
            f"Category '{definition.name}' lacks its base unit '{definition.base}'"
        )
    if not base.descriptor.is_identity:
        raise CatalogInitError(
            f"Base unit '{definition.base}' of '{definition.name}' must have an identity descriptor"
        )
    return Category(definition.name, definition.base, MappingProxyType(units))


def build_catalog(
    definitions: Iterable[CategoryDefinition] = CATEGORY_DEFINITIONS,
    *,
    version: str = CATALOG_VERSION,
) -> Catalog:
    """Validate ``definitions`` and return the frozen catalog.

    Raises :class:`CatalogInitError` on any malformed entry; the table is
    shipped with the code, so a failure here is a programming error.
    """

    categories: dict[str, Category] = {}
    for definition in definitions:
        if not definition.name:
            raise CatalogInitError("Category without a name")
        if definition.name in categories:
            raise CatalogInitError(f"Duplicate category '{definition.name}'")
        categories[definition.name] = _build_category(definition)
    if not categories:
        raise CatalogInitError("Catalog definition table is empty")
    catalog = Catalog(categories, version=version)
    logger.info(
        "unit catalog %s built: %d categories, %d units",
        version,
        len(categories),
        sum(len(category.units) for category in categories.values()),
    )
    return catalog


__all__ = [
    "Catalog",
    "Category",
    "ConversionDescriptor",
    "DescriptorKind",
    "Unit",
    "build_catalog",
]
