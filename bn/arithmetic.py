"""In-place arithmetic on LimbStores.

These are the kernels behind Bn's operators. Each function mutates its
first argument and returns it, leaving operands untouched, so callers
that want to keep a value must copy it first:

    total = parse_text("1.5")
    add_into(total, parse_text("2.25"), parse_text("-0.75"))
    to_string(total)  # "3"

All results are normalized before returning.
"""

from __future__ import annotations

import structlog

from bn.compare import align, compare
from bn.constants import LIMB_BASE, LIMB_MAX
from bn.limbs import LimbStore

logger = structlog.get_logger()

_ONE = LimbStore(1, [1], 0)
_HALF = LimbStore(1, [500], 1)


def _complement(magnitude: list[int]) -> list[int]:
    """Return LIMB_BASE**len(magnitude) - magnitude, limb-wise.

    Low zero limbs stay zero, the first nonzero limb is taken against
    LIMB_BASE and every limb above it against LIMB_MAX.
    """
    result = []
    borrowed = False
    for limb in magnitude:
        if borrowed:
            result.append(LIMB_MAX - limb)
        elif limb == 0:
            result.append(0)
        else:
            result.append(LIMB_BASE - limb)
            borrowed = True
    return result


def _add_magnitudes(target: LimbStore, operand: LimbStore) -> None:
    """target.magnitude += operand.magnitude (aligned, same sign)."""
    carry = 0
    magnitude = target.magnitude
    for i, limb in enumerate(operand.magnitude):
        total = magnitude[i] + limb + carry
        carry = 1 if total >= LIMB_BASE else 0
        magnitude[i] = total - LIMB_BASE if carry else total
    if carry:
        magnitude.append(1)


def _subtract_magnitudes(target: LimbStore, operand: LimbStore) -> None:
    """target.magnitude -= operand.magnitude (aligned), made absolute."""
    borrow = 0
    magnitude = target.magnitude
    for i, limb in enumerate(operand.magnitude):
        diff = magnitude[i] - limb - borrow
        borrow = 1 if diff < 0 else 0
        magnitude[i] = diff + LIMB_BASE if borrow else diff
    if borrow:
        # Minuend was the smaller magnitude; the limbs now hold its
        # base-1000 complement.
        logger.debug("subtract_borrow_corrected", limbs=len(magnitude))
        target.magnitude = _complement(magnitude)


def add_into(target: LimbStore, *operands: LimbStore) -> LimbStore:
    """Add each operand to target in place.

    Operands are read but never modified; alignment happens on copies.
    """
    for operand in operands:
        if operand.is_zero:
            continue
        if target.is_zero:
            target.assign(operand)
            continue

        operand = operand.copy()
        align(target, operand)

        if target.sign == operand.sign:
            _add_magnitudes(target, operand)
        else:
            target.sign *= compare(target, operand, aligned=True, ignore_sign=True)
            _subtract_magnitudes(target, operand)

        target.normalize()

    return target.normalize()


def subtract_into(target: LimbStore, *operands: LimbStore) -> LimbStore:
    """Subtract each operand from target in place."""
    negated = []
    for operand in operands:
        operand = operand.copy()
        negate_into(operand)
        negated.append(operand)
    return add_into(target, *negated)


def multiply_into(target: LimbStore, *operands: LimbStore) -> LimbStore:
    """Multiply target by each operand in place, left to right.

    Schoolbook convolution in base 1000: limb i of target times limb j of
    the operand accumulates into position i + j.
    """
    for operand in operands:
        if target.is_zero or operand.is_zero:
            target.assign(LimbStore.zero())
            continue

        left = target.magnitude
        right = operand.magnitude
        result = [0] * (len(left) + len(right))

        for i, a in enumerate(left):
            if a == 0:
                continue
            carry = 0
            for j, b in enumerate(right):
                carry += result[i + j] + a * b
                result[i + j] = carry % LIMB_BASE
                carry //= LIMB_BASE
            # Earlier rows stop one limb below this position
            result[i + len(right)] = carry

        target.sign *= operand.sign
        target.scale += operand.scale
        target.magnitude = result
        target.normalize()

    return target


def negate_into(target: LimbStore) -> LimbStore:
    """Flip the sign. Zero has sign 0 and stays zero."""
    target.sign = -target.sign
    return target


def truncate_into(target: LimbStore) -> LimbStore:
    """Drop the fractional limbs (round toward zero)."""
    if target.scale > 0:
        del target.magnitude[: target.scale]
        target.scale = 0
        if not target.magnitude:
            target.magnitude = [0]
    return target.normalize()


def floor_into(target: LimbStore) -> LimbStore:
    """Round toward negative infinity."""
    if target.sign < 0 and not target.is_integral:
        subtract_into(target, _ONE)
    return truncate_into(target)


def ceiling_into(target: LimbStore) -> LimbStore:
    """Round toward positive infinity."""
    if target.sign > 0 and not target.is_integral:
        add_into(target, _ONE)
    return truncate_into(target)


def round_into(target: LimbStore) -> LimbStore:
    """floor(target + 0.5): halves round toward positive infinity."""
    add_into(target, _HALF)
    return floor_into(target)


def bitwise_not_into(target: LimbStore) -> LimbStore:
    """Integer complement, -(trunc(target) + 1), like ~ on two's complement ints."""
    truncate_into(target)
    add_into(target, _ONE)
    return negate_into(target)
