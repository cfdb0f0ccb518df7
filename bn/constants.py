"""Representation constants for Bn.

Every limb packs LIMB_DIGITS decimal digits, so carries propagate in
radix LIMB_BASE.
"""

# Decimal digits per limb
LIMB_DIGITS = 3

# Carry radix (10 ** LIMB_DIGITS)
LIMB_BASE = 10**LIMB_DIGITS

# Largest value a single limb can hold
LIMB_MAX = LIMB_BASE - 1

# Characters ignored anywhere in a literal ("1,000", "1_000"); whitespace is
# ignored as well
GROUPING_SEPARATORS = frozenset(",_")

# Operand used by add()/subtract() when called with no arguments
DEFAULT_ADD_OPERAND = 1

# Operand used by multiply() when called with no arguments (doubling)
DEFAULT_MULTIPLY_OPERAND = 2

# The only base the formatter can render
DECIMAL_BASE = 10
