from __future__ import annotations

from typing import Union

import jax
import numpy as np

# Integer types that convert to a Fraction without loss
IntegerLike = Union[
    int,
    np.integer,
]

# Types accepted by Fraction.from_decimal. Floats are converted through their decimal rendering.
DecimalLike = Union[
    int,
    float,
    str,
    np.integer,
    np.floating,
]

# Scalars that a Fraction can be combined with in arithmetic
FractionOperand = Union[
    int,
    float,
]

# Types on which the functional api falls back to jax.numpy
ArrayLike = Union[
    jax.Array,
    np.ndarray,
]
