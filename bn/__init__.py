"""Bn - arbitrary-precision signed decimal numbers."""

from bn.errors import BnError, CapabilityError, FormatError
from bn.number import Bn, BnLike, product_of, sum_of

__version__ = "0.1.0"
__all__ = [
    "Bn",
    "BnLike",
    "BnError",
    "CapabilityError",
    "FormatError",
    "product_of",
    "sum_of",
    "__version__",
]
