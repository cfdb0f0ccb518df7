"""Factory functions for creating test objects.

Usage:
    from tests.helpers import make_store, parse, render

    store = make_store(1, [456, 123], 1)   # 123.456
    assert render(store) == "123.456"
"""

from decimal import Decimal, localcontext

from bn.formatter import to_string
from bn.limbs import LimbStore
from bn.parser import parse_text, strip_separators

# Enough digits for every sample sum and product to stay exact
ORACLE_PRECISION = 200


def make_store(sign: int, magnitude: list[int], scale: int = 0) -> LimbStore:
    """Create a LimbStore without normalizing it."""
    return LimbStore(sign=sign, magnitude=list(magnitude), scale=scale)


def parse(text: str) -> LimbStore:
    """Shorthand for parse_text."""
    return parse_text(text)


def render(store: LimbStore) -> str:
    """Shorthand for to_string."""
    return to_string(store)


def exact(text: str) -> Decimal:
    """Parse a literal with decimal.Decimal as an exact oracle."""
    with localcontext() as ctx:
        ctx.prec = ORACLE_PRECISION
        return +Decimal(strip_separators(text))
