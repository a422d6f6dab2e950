"""Global overflow check flag. If True, every constructed Fraction is checked against the signed integer range
given by rationax.core.constants. If False, numerator and denominator are unbounded python integers.
"""

CHECK_OVERFLOW: bool = True
