"""Pytest configuration and fixtures."""

from collections.abc import Iterator
from decimal import localcontext

import pytest

from tests.helpers.factories import ORACLE_PRECISION


@pytest.fixture
def oracle() -> Iterator[None]:
    """Run the test body inside a high-precision Decimal context.

    Sums and products of the sample literals are then exact, so Decimal
    results can be compared against Bn results digit for digit.
    """
    with localcontext() as ctx:
        ctx.prec = ORACLE_PRECISION
        yield
