"""Two-hop conversion between units of one category."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from fractions import Fraction
from typing import Dict

from .catalog import Catalog, ConversionDescriptor, DescriptorKind
from .errors import ConversionError, InvalidValueError
from .formatter import format_value


@dataclass(frozen=True, slots=True)
class ConversionRequest:
    category: str
    from_unit: str
    to_unit: str
    value: float


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """Converted value together with its display string."""

    request: ConversionRequest
    value: float
    formatted: str

    def to_dict(self) -> Dict[str, object]:
        return {
            "value": self.value,
            "formatted": self.formatted,
            "category": self.request.category,
            "from_unit": self.request.from_unit,
            "to_unit": self.request.to_unit,
            "input": self.request.value,
        }


def coerce_value(value: object) -> float:
    """Return ``value`` as a finite float or raise :class:`InvalidValueError`."""

    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidValueError("Value must be a real number.")
    try:
        number = float(value)
    except OverflowError as exc:
        raise InvalidValueError("Value is too large to convert.") from exc
    if not math.isfinite(number):
        raise InvalidValueError("Value must be a finite number.")
    return number


def _to_base(descriptor: ConversionDescriptor, amount: Fraction) -> Fraction:
    if descriptor.kind is DescriptorKind.LINEAR:
        return amount * descriptor.scale
    if descriptor.kind is DescriptorKind.AFFINE:
        return amount * descriptor.scale + descriptor.offset
    raise ConversionError(f"Unsupported descriptor kind {descriptor.kind!r}")


def _from_base(descriptor: ConversionDescriptor, amount: Fraction) -> Fraction:
    if descriptor.kind is DescriptorKind.LINEAR:
        return amount / descriptor.scale
    if descriptor.kind is DescriptorKind.AFFINE:
        return (amount - descriptor.offset) / descriptor.scale
    raise ConversionError(f"Unsupported descriptor kind {descriptor.kind!r}")


def convert(
    catalog: Catalog,
    value: object,
    category: str,
    from_unit: str,
    to_unit: str,
) -> float:
    """Convert ``value`` from ``from_unit`` to ``to_unit`` within ``category``.

    The value is checked before any lookup. Both hops run on exact rationals
    and the result is rounded once when it is turned back into a float, so
    ``A -> B -> A`` recovers the input to within a couple of ulps.
    """

    number = coerce_value(value)
    source = catalog.resolve_unit(category, from_unit)
    target = catalog.resolve_unit(category, to_unit)
    if source.name == target.name:
        return number
    exact = _from_base(target.descriptor, _to_base(source.descriptor, Fraction(number)))
    try:
        return float(exact)
    except OverflowError as exc:
        raise InvalidValueError(
            f"Converting {number!r} {from_unit} to {to_unit} overflows a float."
        ) from exc


def convert_request(catalog: Catalog, request: ConversionRequest) -> ConversionResult:
    value = convert(
        catalog, request.value, request.category, request.from_unit, request.to_unit
    )
    return ConversionResult(request=request, value=value, formatted=format_value(value))


__all__ = [
    "ConversionRequest",
    "ConversionResult",
    "coerce_value",
    "convert",
    "convert_request",
]
