"""Test helpers module for shared test utilities.

- constants: Sample literals used by property-style tests
- factories: LimbStore factory and Decimal oracle helpers
"""

from tests.helpers.constants import INVALID_LITERALS, SAMPLE_LITERALS, ZERO_LITERALS
from tests.helpers.factories import exact, make_store, parse, render

__all__ = [
    "INVALID_LITERALS",
    "SAMPLE_LITERALS",
    "ZERO_LITERALS",
    "exact",
    "make_store",
    "parse",
    "render",
]
