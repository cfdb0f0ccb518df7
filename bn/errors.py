"""Exception types raised by Bn.

Only two things can go wrong with a Bn: the input text is not a decimal
literal, or the caller asks for something Bn does not do (division, a
non-decimal base). Arithmetic and comparison on well-formed values never
raise.
"""

from __future__ import annotations

from typing import Any


class BnError(ArithmeticError):
    """Base class for Bn errors."""

    pass


class FormatError(BnError, ValueError):
    """Input does not match the decimal/scientific literal grammar.

    Attributes:
        text: The original input, before separators were stripped
    """

    def __init__(self, text: Any) -> None:
        self.text = text
        super().__init__(f"Invalid Bn: {text!r}")


class CapabilityError(BnError):
    """Requested operation is not supported (division, base other than 10)."""

    pass
