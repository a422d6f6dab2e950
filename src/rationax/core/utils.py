from __future__ import annotations
from typing import Iterable

from rationax.core.fraction import Fraction
from rationax.core.typing import DecimalLike


def to_fractions(values: Iterable[DecimalLike]) -> list[Fraction]:
    """Converts every value to a Fraction using its decimal rendering (see Fraction.from_decimal)."""
    return [Fraction.from_decimal(v) for v in values]
