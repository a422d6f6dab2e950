from rationax import functional
from rationax.core.fraction import Fraction
from rationax.core.gcd import gcd
from rationax.core.utils import to_fractions
from rationax.vector.vector import Vector

__all__ = [
    "Fraction",
    "Vector",
    "gcd",
    "to_fractions",
    "functional",
]
