"""Checks on the fields a user types in for a coat."""

from __future__ import annotations

from .errors import ValidationError

SIZES = ("XXS", "XS", "S", "M", "L", "XL", "XXL")

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def validate_color(color: str) -> bool:
    """A color is valid when it holds no digit."""
    return not any(ch in "0123456789" for ch in color)


def validate_size(size: str) -> bool:
    """A size is valid when it is one of the known sizes."""
    return size in SIZES


def _leading_int(text: str, what: str) -> int:
    """Read an integer the way a lenient C-style parser does: leading blanks,
    an optional sign, then digits; anything after the digits is ignored."""
    if not text:
        raise ValidationError(f"The {what} is empty!")
    if any(ch.isascii() and ch.isalpha() for ch in text):
        raise ValidationError(f"The {what} must not contain letters!")
    rest = text.lstrip(" \t\n\r\f\v")
    sign = ""
    if rest[:1] in ("+", "-"):
        sign, rest = rest[0], rest[1:]
    digits = ""
    for ch in rest:
        if ch not in "0123456789":
            break
        digits += ch
    if not digits:
        raise ValidationError(f"The {what} is not a number!")
    value = int(sign + digits)
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValidationError(f"The {what} is out of range!")
    return value


def validate_price(price: str) -> int:
    """Return the price as an integer; raise ValidationError if invalid."""
    return _leading_int(price, "price")


def validate_quantity(quantity: str) -> int:
    """Return the quantity as an integer; raise ValidationError if invalid."""
    return _leading_int(quantity, "quantity")


def validate_photograph(photograph: str) -> bool:
    """A photograph link must be an https link of at least 13 characters
    that mentions ``.com`` or ``.jpg``."""
    if len(photograph) < 13:
        return False
    if not photograph.startswith("https://"):
        return False
    return ".com" in photograph or ".jpg" in photograph