"""Limb store: the in-memory representation of a signed decimal value.

A value is held as a sign, a list of base-1000 limbs (least-significant
first) and a scale counting how many of those limbs sit to the right of
the decimal point:

    value = sign * sum(magnitude[i] * 1000**i) * 10**(-3 * scale)

Example: 123.456 is stored as sign=1, magnitude=[456, 123], scale=1.

A normalized store has no zero limb at either end of the magnitude (unless
the magnitude is a single limb), and zero is always sign=0, magnitude=[0],
scale=0. Normalized stores are therefore unique per value.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class LimbStore:
    """Mutable sign/magnitude/scale triple.

    Kernel functions in bn.parser, bn.compare and bn.arithmetic work on
    LimbStore in place. Use copy() before mutating a store someone else
    holds.

    Attributes:
        sign: -1, 0 or +1 (0 iff the value is zero)
        magnitude: Limbs in [0, 999], least-significant first
        scale: Limbs after the decimal point (negative means implicit
            trailing zero limbs)
    """

    sign: int = 0
    magnitude: list[int] = field(default_factory=lambda: [0])
    scale: int = 0

    @classmethod
    def zero(cls) -> LimbStore:
        """Create canonical zero."""
        return cls()

    def copy(self) -> LimbStore:
        """Deep copy (the limb list is never shared)."""
        return LimbStore(self.sign, list(self.magnitude), self.scale)

    def assign(self, other: LimbStore) -> LimbStore:
        """Overwrite this store with a deep copy of other."""
        self.sign = other.sign
        self.magnitude = list(other.magnitude)
        self.scale = other.scale
        return self

    @property
    def is_zero(self) -> bool:
        return self.sign == 0

    @property
    def is_integral(self) -> bool:
        """True if no limb lies right of the decimal point (normalized stores)."""
        return self.scale <= 0

    def key(self) -> tuple[int, tuple[int, ...], int]:
        """Hashable identity of a normalized store."""
        return (self.sign, tuple(self.magnitude), self.scale)

    def normalize(self) -> LimbStore:
        """Strip redundant zero limbs and collapse zero to canonical form.

        Low-end zero limbs are fractional (or implicit) positions, so each
        one removed decrements scale. High-end zero limbs carry no weight.
        """
        magnitude = self.magnitude

        low = 0
        while low < len(magnitude) and magnitude[low] == 0:
            low += 1

        if low == len(magnitude):
            self.sign = 0
            self.magnitude = [0]
            self.scale = 0
            return self

        high = len(magnitude)
        while magnitude[high - 1] == 0:
            high -= 1

        if low or high < len(magnitude):
            self.magnitude = magnitude[low:high]
            self.scale -= low

        return self
