# ruff: noqa: F811
import jax.numpy as jnp
from plum import dispatch, overload

from rationax.core.typing import ArrayLike
from rationax.vector.vector import Vector


## dot #####################################
@overload
def dot(x: Vector, y: Vector):
    return x.dot(y)


@overload
def dot(x: ArrayLike, y: ArrayLike):
    return jnp.dot(x, y)


@dispatch
def dot(x, y):
    del x, y
    raise NotImplementedError()
