"""Width of the integers stored in a Fraction. Numerator and denominator of every reduced result have to fit into
a signed integer of this many bits, otherwise an OverflowError is raised (see rationax.core.glob.CHECK_OVERFLOW).
"""

INT_BITS: int = 128
INT_MIN: int = -(2 ** (INT_BITS - 1))
INT_MAX: int = 2 ** (INT_BITS - 1) - 1
# decimal digits of INT_MAX
INT_DIGITS: int = len(str(INT_MAX))
