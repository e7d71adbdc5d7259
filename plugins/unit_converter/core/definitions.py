"""Static definition table for the unit catalog.

Coefficients are written as exact decimal or fraction strings so the catalog
can hold them as rationals. Every descriptor relates a unit to the base unit of
its category:

* ``linear``: ``base = value * factor``
* ``affine``: ``base = value * scale + offset``
"""

from __future__ import annotations

from dataclasses import dataclass

CATALOG_VERSION = "2024.1"

LINEAR = "linear"
AFFINE = "affine"


@dataclass(frozen=True)
class UnitDefinition:
    """One row of the definition table."""

    name: str
    abbreviation: str
    kind: str
    scale: str
    offset: str = "0"


@dataclass(frozen=True)
class CategoryDefinition:
    """A category, its base unit and its member rows in display order."""

    name: str
    base: str
    units: tuple[UnitDefinition, ...]


def linear(name: str, abbreviation: str, factor: str) -> UnitDefinition:
    return UnitDefinition(name, abbreviation, LINEAR, factor)


def affine(name: str, abbreviation: str, scale: str, offset: str) -> UnitDefinition:
    return UnitDefinition(name, abbreviation, AFFINE, scale, offset)


CATEGORY_DEFINITIONS: tuple[CategoryDefinition, ...] = (
    CategoryDefinition(
        "length",
        base="meter",
        units=(
            linear("meter", "m", "1"),
            linear("kilometer", "km", "1000"),
            linear("centimeter", "cm", "1/100"),
            linear("millimeter", "mm", "1/1000"),
            linear("micrometer", "µm", "1/1000000"),
            linear("nanometer", "nm", "1/1000000000"),
            linear("mile", "mi", "1609.344"),
            linear("yard", "yd", "0.9144"),
            linear("foot", "ft", "0.3048"),
            linear("inch", "in", "0.0254"),
            linear("nautical mile", "nmi", "1852"),
        ),
    ),
    CategoryDefinition(
        "mass",
        base="kilogram",
        units=(
            linear("kilogram", "kg", "1"),
            linear("gram", "g", "1/1000"),
            linear("milligram", "mg", "1/1000000"),
            linear("metric ton", "t", "1000"),
            linear("pound", "lb", "0.45359237"),
            linear("ounce", "oz", "0.028349523125"),
            linear("stone", "st", "6.35029318"),
        ),
    ),
    CategoryDefinition(
        "temperature",
        base="Celsius",
        units=(
            affine("Celsius", "°C", "1", "0"),
            affine("Fahrenheit", "°F", "5/9", "-160/9"),
            affine("Kelvin", "K", "1", "-273.15"),
        ),
    ),
    CategoryDefinition(
        "volume",
        base="liter",
        units=(
            linear("liter", "L", "1"),
            linear("milliliter", "mL", "1/1000"),
            linear("cubic meter", "m³", "1000"),
            linear("gallon", "gal", "3.785411784"),
            linear("quart", "qt", "0.946352946"),
            linear("pint", "pt", "0.473176473"),
            linear("cup", "cup", "0.2365882365"),
            linear("fluid ounce", "fl oz", "0.0295735295625"),
            linear("tablespoon", "tbsp", "0.01478676478125"),
            linear("teaspoon", "tsp", "0.00492892159375"),
        ),
    ),
    CategoryDefinition(
        "area",
        base="square meter",
        units=(
            linear("square meter", "m²", "1"),
            linear("square kilometer", "km²", "1000000"),
            linear("square centimeter", "cm²", "1/10000"),
            linear("hectare", "ha", "10000"),
            linear("acre", "ac", "4046.8564224"),
            linear("square mile", "mi²", "2589988.110336"),
            linear("square yard", "yd²", "0.83612736"),
            linear("square foot", "ft²", "0.09290304"),
            linear("square inch", "in²", "0.00064516"),
        ),
    ),
    CategoryDefinition(
        "time",
        base="second",
        units=(
            linear("millisecond", "ms", "1/1000"),
            linear("second", "s", "1"),
            linear("minute", "min", "60"),
            linear("hour", "h", "3600"),
            linear("day", "d", "86400"),
            linear("week", "wk", "604800"),
            linear("year", "yr", "31557600"),
        ),
    ),
    CategoryDefinition(
        "speed",
        base="meter per second",
        units=(
            linear("meter per second", "m/s", "1"),
            linear("kilometer per hour", "km/h", "5/18"),
            linear("mile per hour", "mph", "0.44704"),
            linear("knot", "kn", "463/900"),
            linear("foot per second", "ft/s", "0.3048"),
        ),
    ),
    CategoryDefinition(
        "pressure",
        base="pascal",
        units=(
            linear("pascal", "Pa", "1"),
            linear("kilopascal", "kPa", "1000"),
            linear("megapascal", "MPa", "1000000"),
            linear("bar", "bar", "100000"),
            linear("atmosphere", "atm", "101325"),
            linear("torr", "Torr", "101325/760"),
            linear("pound per square inch", "psi", "44482216152605/6451600000"),
        ),
    ),
    CategoryDefinition(
        "energy",
        base="joule",
        units=(
            linear("joule", "J", "1"),
            linear("kilojoule", "kJ", "1000"),
            linear("calorie", "cal", "4.184"),
            linear("kilocalorie", "kcal", "4184"),
            linear("watt hour", "Wh", "3600"),
            linear("kilowatt hour", "kWh", "3600000"),
            linear("electronvolt", "eV", "1.602176634e-19"),
            linear("British thermal unit", "BTU", "1055.05585262"),
        ),
    ),
    CategoryDefinition(
        "data",
        base="byte",
        units=(
            linear("bit", "b", "1/8"),
            linear("byte", "B", "1"),
            linear("kilobyte", "kB", "1000"),
            linear("megabyte", "MB", "1000000"),
            linear("gigabyte", "GB", "1000000000"),
            linear("terabyte", "TB", "1000000000000"),
            linear("kibibyte", "KiB", "1024"),
            linear("mebibyte", "MiB", "1048576"),
            linear("gibibyte", "GiB", "1073741824"),
        ),
    ),
)


__all__ = [
    "AFFINE",
    "CATALOG_VERSION",
    "CATEGORY_DEFINITIONS",
    "CategoryDefinition",
    "LINEAR",
    "UnitDefinition",
    "affine",
    "linear",
]
