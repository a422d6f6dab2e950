from __future__ import annotations
import logging
import math
import re
import sys
from typing import Any, Callable, NamedTuple

import numpy as np

from rationax.core import glob
from rationax.core.constants import INT_DIGITS, INT_MAX, INT_MIN
from rationax.core.gcd import gcd
from rationax.core.typing import DecimalLike, FractionOperand, IntegerLike

logger = logging.getLogger(__name__)

# sign, integer digits, fractional digits, exponent
_DECIMAL_PATTERN = re.compile(r"^([+-]?)(\d*)(?:\.(\d*))?(?:[eE]([+-]?\d+))?$")

_HASH_MODULUS = sys.hash_info.modulus
_HASH_INF = sys.hash_info.inf


def _as_int(value: Any) -> int:
    if isinstance(value, (int, np.integer)):
        return int(value)
    raise TypeError(f"Fraction parts must be integers, but got {type(value).__name__}: {value!r}")


def _check_width(numerator: int, denominator: int) -> None:
    if not glob.CHECK_OVERFLOW:
        return
    if not (INT_MIN <= numerator <= INT_MAX) or denominator > INT_MAX:
        raise OverflowError(f"Fraction {numerator}/{denominator} exceeds the supported integer range")


class _FractionParts(NamedTuple):
    numerator: int
    denominator: int


class Fraction(_FractionParts):
    """Exact rational number, always stored in lowest terms with a positive denominator.

    Fractions are immutable values. Arithmetic with other fractions and integers is exact, floats are converted
    through their decimal rendering (see ``from_decimal``).

    Example:
        >>> Fraction(1, 2) + Fraction(2, 3)
        Fraction(7, 6)
        >>> str(Fraction(8, 2))
        '4'
    """

    __slots__ = ()

    # numpy scalars on the left return NotImplemented instead of treating the fraction as an array
    __array_ufunc__ = None

    def __new__(cls, numerator: IntegerLike = 0, denominator: IntegerLike = 1) -> Fraction:
        numerator = _as_int(numerator)
        denominator = _as_int(denominator)
        if denominator == 0:
            raise ZeroDivisionError(f"Fraction with zero denominator: {numerator}/0")
        if denominator < 0:
            numerator, denominator = -numerator, -denominator

        # gcd(0, d) == d, so zero always reduces to 0/1
        common_divisor = gcd(numerator, denominator)
        numerator //= common_divisor
        denominator //= common_divisor
        _check_width(numerator, denominator)
        return super().__new__(cls, numerator, denominator)

    @classmethod
    def from_decimal(cls, value: DecimalLike) -> Fraction:
        """
        Converts a base-10 value into an exact fraction by reading its decimal rendering. The value 10.2082
        renders as "10.2082" and becomes 102082/10000, reduced to 51041/5000.

        The conversion is exact with respect to the rendering, not to the binary value of a float. Two floats
        rendering to different strings convert to different fractions, and a float is taken to mean exactly the
        digits that ``str`` shows for it.

        Args:
            value (DecimalLike): Integer, float, numpy scalar or a decimal string like "-1.25" or "1e-05".

        Returns:
            Fraction: Reduced fraction with a power of ten denominator before reduction.
        """
        if isinstance(value, (int, np.integer)):
            return cls(value)
        if isinstance(value, (float, np.floating)):
            if not math.isfinite(value):
                raise ValueError(f"Cannot convert non-finite value {value} to a Fraction")
            text = str(value)
        elif isinstance(value, str):
            text = value.strip()
        else:
            raise TypeError(f"Cannot convert {type(value).__name__} to a Fraction")

        match = _DECIMAL_PATTERN.match(text)
        if match is None:
            raise ValueError(f"Invalid decimal rendering: {text!r}")
        sign, integer_digits, fraction_digits, exponent = match.groups()
        fraction_digits = fraction_digits or ""
        if not integer_digits and not fraction_digits:
            raise ValueError(f"Invalid decimal rendering: {text!r}")

        ten_pow = 10 ** len(fraction_digits)
        numerator = int(integer_digits or "0") * ten_pow + int(fraction_digits or "0")
        denominator = ten_pow
        if exponent is not None and numerator != 0:
            shift = int(exponent)
            # the coefficient cancels at most its own number of digits
            max_shift = INT_DIGITS + len(integer_digits or "") + len(fraction_digits)
            if glob.CHECK_OVERFLOW and abs(shift) > max_shift:
                raise OverflowError(f"Decimal exponent of {text!r} exceeds the supported integer range")
            if shift >= 0:
                numerator *= 10**shift
            else:
                denominator *= 10 ** (-shift)
        if sign == "-":
            numerator = -numerator

        logger.debug("Converting decimal rendering %r to %d/%d", text, numerator, denominator)
        return cls(numerator, denominator)

    from_float = from_decimal

    @classmethod
    def _make(cls, iterable) -> Fraction:
        # NamedTuple._make and _replace bypass __new__
        return cls(*iterable)

    def value(self) -> float:
        return self.numerator / self.denominator

    def reduced(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)

    def reciprocal(self) -> Fraction:
        if self.numerator == 0:
            raise ZeroDivisionError("Cannot take the reciprocal of zero")
        return Fraction(self.denominator, self.numerator)

    def add(self, other: Fraction | FractionOperand) -> Fraction:
        other = _to_fraction(other)
        return Fraction(
            self.numerator * other.denominator + other.numerator * self.denominator,
            self.denominator * other.denominator,
        )

    def subtract(self, other: Fraction | FractionOperand) -> Fraction:
        return self.add(-_to_fraction(other))

    def multiply(self, other: Fraction | FractionOperand) -> Fraction:
        other = _to_fraction(other)
        return Fraction(self.numerator * other.numerator, self.denominator * other.denominator)

    def divide(self, other: Fraction | FractionOperand) -> Fraction:
        other = _to_fraction(other)
        if other.numerator == 0:
            raise ZeroDivisionError("Cannot divide by zero")
        return self.multiply(other.reciprocal())

    # Arithmetic operators
    def __add__(self, other: Any) -> Fraction:  # type: ignore[override]
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Any) -> Fraction:
        return self.__add__(other)

    def __sub__(self, other: Any) -> Fraction:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: Any) -> Fraction:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other.subtract(self)

    def __mul__(self, other: Any) -> Fraction:  # type: ignore[override]
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: Any) -> Fraction:  # type: ignore[override]
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> Fraction:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other: Any) -> Fraction:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other.divide(self)

    def __pow__(self, exponent: int) -> Fraction:
        if not isinstance(exponent, int):
            return NotImplemented

        if exponent == 0:
            if self.numerator == 0:
                raise ZeroDivisionError("0^0 is undefined")
            return Fraction(1, 1)
        elif exponent > 0:
            return Fraction(self.numerator**exponent, self.denominator**exponent)
        else:
            if self.numerator == 0:
                raise ZeroDivisionError("Cannot raise zero to negative power")
            return Fraction(self.denominator ** (-exponent), self.numerator ** (-exponent))

    def __neg__(self) -> Fraction:
        return Fraction(-self.numerator, self.denominator)

    def __pos__(self) -> Fraction:
        return self

    def __abs__(self) -> Fraction:
        return Fraction(abs(self.numerator), self.denominator)

    # Comparison operators
    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Fraction):
            # canonical form is unique, no cross multiplication needed
            return self.numerator == other.numerator and self.denominator == other.denominator
        if isinstance(other, (int, np.integer)):
            return self.denominator == 1 and self.numerator == other
        if isinstance(other, (float, np.floating)):
            if not math.isfinite(other):
                return False
            return float(other).as_integer_ratio() == (self.numerator, self.denominator)
        return False

    def __ne__(self, other: Any) -> bool:
        return not self.__eq__(other)

    def _compare(self, other: Any, op: Callable[[int, int], bool]) -> bool:
        if isinstance(other, Fraction):
            # denominators are positive, so cross multiplication keeps the order
            return op(self.numerator * other.denominator, other.numerator * self.denominator)
        if isinstance(other, (int, np.integer)):
            return op(self.numerator, int(other) * self.denominator)
        if isinstance(other, (float, np.floating)):
            if not math.isfinite(other):
                return op(self.value(), float(other))
            num, denom = float(other).as_integer_ratio()
            return op(self.numerator * denom, num * self.denominator)
        return NotImplemented

    def __lt__(self, other: Any) -> bool:
        return self._compare(other, lambda a, b: a < b)

    def __le__(self, other: Any) -> bool:
        return self._compare(other, lambda a, b: a <= b)

    def __gt__(self, other: Any) -> bool:
        return self._compare(other, lambda a, b: a > b)

    def __ge__(self, other: Any) -> bool:
        return self._compare(other, lambda a, b: a >= b)

    def __hash__(self) -> int:
        # same algorithm as the hash of python numbers, so that Fraction(2, 1) and 2 hash equally
        inverse = pow(self.denominator, _HASH_MODULUS - 2, _HASH_MODULUS)
        if not inverse:
            hash_ = _HASH_INF
        else:
            hash_ = hash(abs(self.numerator)) * inverse % _HASH_MODULUS
        result = hash_ if self.numerator >= 0 else -hash_
        return -2 if result == -1 else result

    # Conversion
    def __bool__(self) -> bool:
        return self.numerator != 0

    def __float__(self) -> float:
        return self.value()

    def __int__(self) -> int:
        if self.numerator < 0:
            return -(-self.numerator // self.denominator)
        return self.numerator // self.denominator

    def __repr__(self) -> str:
        return f"Fraction({self.numerator}, {self.denominator})"

    def __str__(self) -> str:
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"


def _coerce(other: Any) -> Fraction | None:
    if isinstance(other, Fraction):
        return other
    if isinstance(other, (int, np.integer)):
        return Fraction(other)
    if isinstance(other, (float, np.floating)):
        return Fraction.from_decimal(other)
    return None


def _to_fraction(other: Any) -> Fraction:
    result = _coerce(other)
    if result is None:
        raise TypeError(f"Cannot combine Fraction with {type(other).__name__}")
    return result
