"""Alignment and ordering of LimbStores.

align() pads two stores with zero limbs until they share a scale and a
limb count, so limb i of one has the same weight as limb i of the other.
Both functions here mutate their arguments' representation but never the
value they represent.
"""

from __future__ import annotations

from bn.limbs import LimbStore


def is_aligned(a: LimbStore, b: LimbStore) -> bool:
    return a.scale == b.scale and len(a.magnitude) == len(b.magnitude)


def align(a: LimbStore, b: LimbStore) -> None:
    """Pad a and b in place to the same scale and limb count.

    The lower-scale operand gets zero limbs prepended at the
    least-significant end, then the shorter operand gets zero limbs
    appended at the most-significant end. Limb pairs that are zero in
    both operands are then stripped from either end, keeping at least one
    limb each.
    """
    if a.scale != b.scale:
        target, other = (a, b) if a.scale < b.scale else (b, a)
        target.magnitude[:0] = [0] * (other.scale - target.scale)
        target.scale = other.scale

    if len(a.magnitude) != len(b.magnitude):
        target, other = (a, b) if len(a.magnitude) < len(b.magnitude) else (b, a)
        target.magnitude.extend([0] * (len(other.magnitude) - len(target.magnitude)))

    low = 0
    while low < len(a.magnitude) - 1 and a.magnitude[low] == 0 and b.magnitude[low] == 0:
        low += 1
    if low:
        del a.magnitude[:low]
        del b.magnitude[:low]
        a.scale -= low
        b.scale -= low

    while len(a.magnitude) > 1 and a.magnitude[-1] == 0 and b.magnitude[-1] == 0:
        a.magnitude.pop()
        b.magnitude.pop()


def compare(
    a: LimbStore,
    b: LimbStore,
    *,
    aligned: bool = False,
    ignore_sign: bool = False,
) -> int:
    """Order two stores.

    Args:
        a: Left operand
        b: Right operand
        aligned: Caller asserts a and b are already aligned. Operands that
            turn out not to be are aligned anyway.
        ignore_sign: Compare magnitudes only

    Returns:
        -1 if a < b, 0 if a == b, +1 if a > b
    """
    if not ignore_sign and a.sign != b.sign:
        return -1 if a.sign < b.sign else 1

    if not aligned or not is_aligned(a, b):
        align(a, b)

    direction = 1 if ignore_sign else a.sign
    for left, right in zip(reversed(a.magnitude), reversed(b.magnitude)):
        if left < right:
            return -direction
        if left > right:
            return direction

    return 0
