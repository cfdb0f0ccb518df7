"""Bn: arbitrary-precision signed decimal value.

Bn wraps a LimbStore behind an immutable API. Every operation returns a
new Bn, so calls chain without aliasing surprises:

    from bn import Bn

    Bn("1.5").add("2.25", -0.75).multiply(10)   # Bn('30')
    Bn("-2.5").round()                          # Bn('-2')
    Bn("1e-10").to_string()                     # '0.0000000001'

Python operators work against Bn, int, float and Decimal operands.
Arithmetic reads a float through repr; comparisons use its exact binary
value, as Decimal does:

    Bn("0.1") + 0.2 == Bn("0.3")                # True
    Bn("0.1") == 0.1                            # False

Named methods additionally accept literal strings ("1,000.5", "e-3").
Division is not supported and raises CapabilityError.

For hot loops that must avoid allocating, the kernels in bn.arithmetic
mutate a LimbStore in place.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from decimal import Decimal
from typing import Union

from bn import arithmetic
from bn.compare import compare
from bn.constants import (
    DECIMAL_BASE,
    DEFAULT_ADD_OPERAND,
    DEFAULT_MULTIPLY_OPERAND,
    LIMB_BASE,
)
from bn.errors import CapabilityError
from bn.formatter import to_string
from bn.limbs import LimbStore
from bn.parser import parse_text

BnLike = Union["Bn", str, int, float, Decimal]

# Operand types accepted by Python operators (strings only via named methods)
_NUMERIC_TYPES = (int, float, Decimal)


def _store_of(value: BnLike) -> LimbStore:
    """Return a LimbStore for value. A Bn's own store is returned, not copied."""
    if isinstance(value, Bn):
        return value._store
    return parse_text(value)


def _non_finite(value: object) -> Decimal | None:
    """value as a Decimal if it is a float or Decimal NaN or infinity."""
    if isinstance(value, (float, Decimal)):
        special = Decimal(value)
        if not special.is_finite():
            return special
    return None


def _operand_store(value: object) -> LimbStore | None:
    """Store for an arithmetic operand, or None if it is not a finite number.

    Floats go through repr, so 0.1 means Bn("0.1").
    """
    if isinstance(value, Bn):
        return value._store
    if not isinstance(value, _NUMERIC_TYPES) or isinstance(value, bool):
        return None
    if _non_finite(value) is not None:
        return None
    return parse_text(value)


def _comparison_store(value: object) -> LimbStore | None:
    """Store for a comparison operand.

    Floats compare at their exact binary value, as with Decimal, so
    Bn("0.1") != 0.1 and equal values always hash alike.
    """
    if isinstance(value, float) and _non_finite(value) is None:
        return parse_text(Decimal(value))
    return _operand_store(value)


class Bn:
    """Exact signed decimal number.

    Attributes:
        sign: -1, 0 or +1
        magnitude: Base-1000 limbs, least-significant first
        scale: Number of limbs after the decimal point
    """

    __slots__ = ("_store",)
    _store: LimbStore

    def __init__(self, value: BnLike = 0) -> None:
        """Create a Bn from a literal, a number or another Bn.

        Args:
            value: Decimal/scientific text ("1,234.5", "-6e-3", "e10"), an
                int, a finite float or Decimal, or a Bn to copy

        Raises:
            FormatError: If value is not a legal literal (including None
                and NaN)
        """
        if isinstance(value, Bn):
            self._store = value._store.copy()
        else:
            self._store = parse_text(value)

    @classmethod
    def _wrap(cls, store: LimbStore) -> Bn:
        result = cls.__new__(cls)
        result._store = store
        return result

    @classmethod
    def parse(cls, value: BnLike) -> Bn:
        """Parse value into a new Bn (a Bn argument yields an equal clone)."""
        return cls(value)

    def clone(self) -> Bn:
        return Bn._wrap(self._store.copy())

    @property
    def sign(self) -> int:
        return self._store.sign

    @property
    def magnitude(self) -> tuple[int, ...]:
        return tuple(self._store.magnitude)

    @property
    def scale(self) -> int:
        return self._store.scale

    # --- Comparison ---

    def compare(self, other: BnLike, *, aligned: bool = False, ignore_sign: bool = False) -> int:
        """Three-way comparison.

        Args:
            other: Value to compare against
            aligned: Skip alignment when both values already share scale
                and limb count
            ignore_sign: Compare absolute values

        Returns:
            -1 if self < other, 0 if equal, +1 if self > other
        """
        return compare(
            self._store.copy(),
            _store_of(other).copy(),
            aligned=aligned,
            ignore_sign=ignore_sign,
        )

    cmp = compare

    def less(self, other: BnLike, **options: bool) -> bool:
        return self.compare(other, **options) < 0

    lt = less

    def lte(self, other: BnLike, **options: bool) -> bool:
        return self.compare(other, **options) <= 0

    def equal(self, other: BnLike, **options: bool) -> bool:
        return self.compare(other, **options) == 0

    eq = equal

    def gte(self, other: BnLike, **options: bool) -> bool:
        return self.compare(other, **options) >= 0

    def greater(self, other: BnLike, **options: bool) -> bool:
        return self.compare(other, **options) > 0

    gt = greater

    # --- Arithmetic ---

    def negate(self) -> Bn:
        return Bn._wrap(arithmetic.negate_into(self._store.copy()))

    n = negate

    def abs(self) -> Bn:
        """Absolute value."""
        store = self._store.copy()
        store.sign = abs(store.sign)
        return Bn._wrap(store)

    def add(self, *operands: BnLike) -> Bn:
        """Sum of self and every operand (adds 1 when called with none)."""
        if not operands:
            operands = (DEFAULT_ADD_OPERAND,)
        stores = [_store_of(operand) for operand in operands]
        return Bn._wrap(arithmetic.add_into(self._store.copy(), *stores))

    a = add

    def subtract(self, *operands: BnLike) -> Bn:
        """Self minus every operand (subtracts 1 when called with none)."""
        if not operands:
            operands = (DEFAULT_ADD_OPERAND,)
        stores = [_store_of(operand) for operand in operands]
        return Bn._wrap(arithmetic.subtract_into(self._store.copy(), *stores))

    s = subtract

    def multiply(self, *operands: BnLike) -> Bn:
        """Product of self and every operand (doubles when called with none)."""
        if not operands:
            operands = (DEFAULT_MULTIPLY_OPERAND,)
        stores = [_store_of(operand) for operand in operands]
        return Bn._wrap(arithmetic.multiply_into(self._store.copy(), *stores))

    m = multiply

    def divide(self, *operands: BnLike) -> Bn:
        """Not supported.

        Raises:
            CapabilityError: Always
        """
        raise CapabilityError("Bn does not support division")

    div = d = divide

    def truncate(self) -> Bn:
        """Drop the fractional part (round toward zero)."""
        return Bn._wrap(arithmetic.truncate_into(self._store.copy()))

    trunc = t = truncate

    def floor(self) -> Bn:
        return Bn._wrap(arithmetic.floor_into(self._store.copy()))

    f = _ = floor

    def ceiling(self) -> Bn:
        return Bn._wrap(arithmetic.ceiling_into(self._store.copy()))

    ceil = c = ceiling

    def round(self) -> Bn:
        """Round to an integer; halves go toward positive infinity (-2.5 -> -2)."""
        return Bn._wrap(arithmetic.round_into(self._store.copy()))

    r = round

    def bitwise_not(self) -> Bn:
        """-(trunc(self) + 1), matching ~ on integers."""
        return Bn._wrap(arithmetic.bitwise_not_into(self._store.copy()))

    bn = bitwise_not

    # --- Formatting ---

    def to_string(self, base: int = DECIMAL_BASE) -> str:
        """Canonical decimal text.

        Raises:
            CapabilityError: If base is not 10
        """
        return to_string(self._store, base)

    def __str__(self) -> str:
        return to_string(self._store)

    def __repr__(self) -> str:
        return f"Bn('{self}')"

    def __hash__(self) -> int:
        # Same hash as the equal Decimal (and int, for integral values)
        return hash(Decimal(str(self)))

    # --- Operators ---

    def __add__(self, other: object) -> Bn:
        store = _operand_store(other)
        if store is None:
            return NotImplemented
        return Bn._wrap(arithmetic.add_into(self._store.copy(), store))

    def __radd__(self, other: object) -> Bn:
        return self.__add__(other)

    def __sub__(self, other: object) -> Bn:
        store = _operand_store(other)
        if store is None:
            return NotImplemented
        return Bn._wrap(arithmetic.subtract_into(self._store.copy(), store))

    def __rsub__(self, other: object) -> Bn:
        store = _operand_store(other)
        if store is None:
            return NotImplemented
        return Bn._wrap(arithmetic.subtract_into(store.copy(), self._store))

    def __mul__(self, other: object) -> Bn:
        store = _operand_store(other)
        if store is None:
            return NotImplemented
        return Bn._wrap(arithmetic.multiply_into(self._store.copy(), store))

    def __rmul__(self, other: object) -> Bn:
        return self.__mul__(other)

    def __truediv__(self, other: object) -> Bn:
        raise CapabilityError("Bn does not support division")

    __rtruediv__ = __floordiv__ = __rfloordiv__ = __truediv__

    def __neg__(self) -> Bn:
        return self.negate()

    def __pos__(self) -> Bn:
        return self

    def __abs__(self) -> Bn:
        return self.abs()

    def __invert__(self) -> Bn:
        return self.bitwise_not()

    def __trunc__(self) -> Bn:
        return self.truncate()

    def __floor__(self) -> Bn:
        return self.floor()

    def __ceil__(self) -> Bn:
        return self.ceiling()

    def __round__(self, ndigits: int | None = None) -> Bn:
        if ndigits is not None:
            raise CapabilityError("Bn can only round to an integer")
        return self.round()

    def _rich_compare(self, other: object, accept: Callable[[int], bool]) -> bool:
        """Apply accept to the three-way order of self against other.

        NaN is unordered (every comparison is False); infinities sit past
        every Bn. Foreign types yield NotImplemented.
        """
        special = _non_finite(other)
        if special is not None:
            if special.is_nan():
                return False
            return accept(-1 if special > 0 else 1)
        store = _comparison_store(other)
        if store is None:
            return NotImplemented
        return accept(compare(self._store.copy(), store.copy()))

    def __eq__(self, other: object) -> bool:
        return self._rich_compare(other, lambda order: order == 0)

    def __lt__(self, other: object) -> bool:
        return self._rich_compare(other, lambda order: order < 0)

    def __le__(self, other: object) -> bool:
        return self._rich_compare(other, lambda order: order <= 0)

    def __gt__(self, other: object) -> bool:
        return self._rich_compare(other, lambda order: order > 0)

    def __ge__(self, other: object) -> bool:
        return self._rich_compare(other, lambda order: order >= 0)

    # --- Conversion ---

    def __bool__(self) -> bool:
        """True if non-zero."""
        return self._store.sign != 0

    def __int__(self) -> int:
        """Truncate toward zero and convert to int."""
        store = self.truncate()._store
        result = 0
        for limb in reversed(store.magnitude):
            result = result * LIMB_BASE + limb
        # A truncated store has scale <= 0: trailing whole zero limbs
        return store.sign * result * LIMB_BASE ** -store.scale

    def __float__(self) -> float:
        return float(str(self))


def sum_of(values: Iterable[BnLike], start: BnLike = 0) -> Bn:
    """Add up a sequence of operands.

    Example: sum_of(["1.5", 2, Bn("-0.5")]) -> Bn('3')
    """
    total = Bn(start)._store
    for value in values:
        arithmetic.add_into(total, _store_of(value))
    return Bn._wrap(total)


def product_of(values: Iterable[BnLike], start: BnLike = 1) -> Bn:
    """Multiply a sequence of operands together."""
    total = Bn(start)._store
    for value in values:
        arithmetic.multiply_into(total, _store_of(value))
    return Bn._wrap(total)
