# ruff: noqa: F811
import jax.numpy as jnp
from plum import dispatch, overload

from rationax.core.fraction import Fraction
from rationax.core.typing import ArrayLike
from rationax.vector.vector import Vector


## add #####################################
@overload
def add(x: Fraction, y: Fraction | int) -> Fraction:
    return x.add(y)


@overload
def add(x: int, y: Fraction) -> Fraction:
    return y.add(x)


@overload
def add(x: Vector, y: Vector) -> Vector:
    return x + y


@overload
def add(x: ArrayLike, y: ArrayLike):
    return jnp.add(x, y)


@dispatch
def add(x, y):
    del x, y
    raise NotImplementedError()


## subtract #####################################
@overload
def subtract(x: Fraction, y: Fraction | int) -> Fraction:
    return x.subtract(y)


@overload
def subtract(x: int, y: Fraction) -> Fraction:
    return Fraction(x).subtract(y)


@overload
def subtract(x: Vector, y: Vector) -> Vector:
    return x - y


@overload
def subtract(x: ArrayLike, y: ArrayLike):
    return jnp.subtract(x, y)


@dispatch
def subtract(x, y):
    del x, y
    raise NotImplementedError()


## multiply #####################################
@overload
def multiply(x: Fraction, y: Fraction | int) -> Fraction:
    return x.multiply(y)


@overload
def multiply(x: int, y: Fraction) -> Fraction:
    return y.multiply(x)


@overload
def multiply(x: Vector, y: Vector):
    # row times column is the dot product
    return x * y


@overload
def multiply(x: Vector, y: Fraction | int | float) -> Vector:
    return x * y


@overload
def multiply(x: Fraction | int | float, y: Vector) -> Vector:
    return x * y


@overload
def multiply(x: ArrayLike, y: ArrayLike):
    return jnp.multiply(x, y)


@dispatch
def multiply(x, y):
    del x, y
    raise NotImplementedError()


## divide #####################################
@overload
def divide(x: Fraction, y: Fraction | int) -> Fraction:
    return x.divide(y)


@overload
def divide(x: int, y: Fraction) -> Fraction:
    return Fraction(x).divide(y)


@overload
def divide(x: Vector, y: Vector) -> Vector:
    return x / y


@overload
def divide(x: Vector, y: Fraction | int | float) -> Vector:
    return x / y


@overload
def divide(x: ArrayLike, y: ArrayLike):
    return jnp.divide(x, y)


@dispatch
def divide(x, y):
    del x, y
    raise NotImplementedError()
