"""Decimal text -> LimbStore.

Accepted grammar, after grouping separators (commas, underscores and
whitespace) are removed:

    [+-]? (digits [. digits*] | . digits+) ([eE] [+-]? digits)?

A literal that starts with a bare exponent ("e-10") means "1e-10".

Scientific notation is resolved on the digit buffer directly: the
exponent and the fraction length give a power of ten, whose multiple of
three becomes the scale and whose remainder becomes zero padding.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Any

import structlog

from bn.constants import GROUPING_SEPARATORS, LIMB_BASE, LIMB_DIGITS
from bn.errors import FormatError
from bn.limbs import LimbStore

logger = structlog.get_logger()

_LITERAL = re.compile(
    r"(?P<sign>[+-]?)"
    r"(?:(?P<int>\d+)\.?(?P<frac>\d*)|\.(?P<frac_only>\d+))"
    r"(?:[eE](?P<exp>[+-]?\d+))?"
)


def _to_text(value: Any) -> str:
    """Coerce an accepted input to literal text.

    Raises:
        FormatError: For None, booleans, NaN, infinities and other types
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool) or value is None:
        raise FormatError(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise FormatError(value)
        return repr(value)
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise FormatError(value)
        return str(value)
    raise FormatError(value)


def strip_separators(text: str) -> str:
    """Remove grouping separators and whitespace from a literal."""
    return "".join(ch for ch in text if ch not in GROUPING_SEPARATORS and not ch.isspace())


def pack_digits(digits: str) -> list[int]:
    """Pack a digit string into limbs, least-significant first.

    Example: "1234567" -> [567, 234, 1]
    """
    limbs = []
    end = len(digits)
    while end > 0:
        start = max(0, end - LIMB_DIGITS)
        limbs.append(int(digits[start:end]))
        end = start
    return limbs or [0]


def store_from_int(value: int) -> LimbStore:
    """Split an int into limbs with divmod; no digit-count limit applies.

    Example: -1234567 -> LimbStore(sign=-1, magnitude=[567, 234, 1], scale=0)
    """
    remaining = abs(value)
    limbs = []
    while remaining:
        remaining, limb = divmod(remaining, LIMB_BASE)
        limbs.append(limb)
    sign = (value > 0) - (value < 0)
    return LimbStore(sign=sign, magnitude=limbs or [0], scale=0).normalize()


def parse_text(value: Any) -> LimbStore:
    """Parse a decimal or scientific literal into a normalized LimbStore.

    Args:
        value: Literal text, an int (split into limbs directly), or a
            float/Decimal coerced to text

    Returns:
        Normalized LimbStore

    Raises:
        FormatError: If the input is not a legal literal
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return store_from_int(value)

    text = strip_separators(_to_text(value))

    if text[:1] in ("e", "E"):
        text = "1" + text

    match = _LITERAL.fullmatch(text)
    if match is None:
        logger.debug("parse_rejected", text=value)
        raise FormatError(value)

    integer = match.group("int") or ""
    fraction = match.group("frac") if match.group("int") is not None else match.group("frac_only")
    exponent = int(match.group("exp") or 0)

    digits = (integer + fraction).lstrip("0")
    if not digits:
        return LimbStore.zero()

    # digits * 10**exp10 == literal; split exp10 into whole limbs and a
    # 0-2 digit remainder absorbed by padding the buffer.
    exp10 = exponent - len(fraction)
    limb_shift, pad = divmod(exp10, LIMB_DIGITS)
    digits += "0" * pad

    store = LimbStore(
        sign=-1 if match.group("sign") == "-" else 1,
        magnitude=pack_digits(digits),
        scale=-limb_shift,
    )
    return store.normalize()
