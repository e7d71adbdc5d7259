"""Lexical pre-filter for raw numeric input."""

from __future__ import annotations

import re

# Optional minus, then digits with an optional fraction, or a bare fraction.
# At least one digit is always required, so "-", "." and "-." are rejected.
_NUMBER_RE = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)", re.ASCII)


def validate(raw: object) -> bool:
    """Return ``True`` when ``raw`` is a plain decimal number literal.

    Exponents, thousands separators, a leading ``+``, whitespace and non-ASCII
    digits are all rejected. Never raises.
    """

    if not isinstance(raw, str):
        return False
    return _NUMBER_RE.fullmatch(raw) is not None


__all__ = ["validate"]
