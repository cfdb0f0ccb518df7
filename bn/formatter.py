"""LimbStore -> canonical decimal text."""

from __future__ import annotations

from bn.compare import align
from bn.constants import DECIMAL_BASE, LIMB_DIGITS
from bn.errors import CapabilityError
from bn.limbs import LimbStore


def to_string(store: LimbStore, base: int = DECIMAL_BASE) -> str:
    """Render a store as plain decimal text.

    The output has no exponent, no grouping and no redundant zeros:
    "123.456", "-0.001", "1000000", "0".

    Args:
        store: Value to render (not modified)
        base: Output base; only 10 is supported

    Raises:
        CapabilityError: If base is not 10
    """
    if base != DECIMAL_BASE:
        raise CapabilityError(f"Cannot convert Bn to base {base}; only base 10 is supported")

    if store.is_zero:
        return "0"

    # Aligning a copy against 1 guarantees limbs from the units position
    # to the last fractional one.
    work = store.copy()
    align(work, LimbStore(1, [1], 0))

    chunks = [f"{limb:0{LIMB_DIGITS}d}" for limb in reversed(work.magnitude)]
    split = len(chunks) - work.scale
    integer = "".join(chunks[:split]).lstrip("0") or "0"
    fraction = "".join(chunks[split:]).rstrip("0")

    text = f"{integer}.{fraction}" if fraction else integer
    return "-" + text if store.sign < 0 else text
