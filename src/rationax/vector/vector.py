from __future__ import annotations
from typing import Any, Iterator, Sequence

import jax
import jax.numpy as jnp

from rationax.core.pytrees import TreeClass, autoinit, frozen_field
from rationax.core.typing import DecimalLike
from rationax.core.utils import to_fractions


@autoinit
class Vector(TreeClass):
    """Vector of arbitrary numeric elements (Fraction, int, float, ...). Elements need to support
    ``+``, ``-``, ``*``, ``/``, ``str`` and a default value ``type(element)()`` equal to zero.

    ``column`` is True for column vectors and False for row vectors. The dot product is only defined between a row
    and a column vector.
    """

    content: tuple
    column: bool = frozen_field(default=True)

    # numpy scalars on the left defer to __rmul__ instead of iterating the vector
    __array_ufunc__ = None

    def __post_init__(self):
        self.content = tuple(self.content)

    @classmethod
    def from_values(
        cls,
        values: Sequence[DecimalLike],
        column: bool = True,
    ) -> Vector:
        return cls(content=tuple(to_fractions(values)), column=column)

    def push(self, value: Any) -> Vector:
        return self.updated_copy(content=self.content + (value,))

    def transpose(self) -> Vector:
        return self.updated_copy(column=not self.column)

    @property
    def T(self) -> Vector:
        return self.transpose()

    def as_array(self) -> jax.Array:
        return jnp.asarray([float(v) for v in self.content])

    def dot(self, other: Vector) -> Any:
        if len(self) != len(other):
            raise ValueError(f"Vectors must have the same length, got {len(self)} and {len(other)}")
        if self.column == other.column:
            raise ValueError("Cannot multiply two vectors with the same orientation")
        if not self.content:
            return 0
        result = type(self.content[0])()
        for a, b in zip(self.content, other.content):
            result += a * b
        return result

    def _check_elementwise(self, other: Vector, op_name: str):
        if len(self) != len(other):
            raise ValueError(f"Cannot {op_name} vectors of length {len(self)} and {len(other)}")
        if self.column != other.column:
            raise ValueError(f"Cannot {op_name} a row vector and a column vector")

    def __add__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_elementwise(other, "add")
        return self.updated_copy(content=tuple(a + b for a, b in zip(self.content, other.content)))

    def __sub__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_elementwise(other, "subtract")
        return self.updated_copy(content=tuple(a - b for a, b in zip(self.content, other.content)))

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, Vector):
            return self.dot(other)
        return self.updated_copy(content=tuple(a * other for a in self.content))

    def __rmul__(self, other: Any) -> Vector:
        return self.updated_copy(content=tuple(other * a for a in self.content))

    def __truediv__(self, other: Any) -> Vector:
        if isinstance(other, Vector):
            self._check_elementwise(other, "divide")
            return self.updated_copy(content=tuple(a / b for a, b in zip(self.content, other.content)))
        return self.updated_copy(content=tuple(a / other for a in self.content))

    def __len__(self) -> int:
        return len(self.content)

    def __getitem__(self, idx: int) -> Any:
        return self.content[idx]

    def __iter__(self) -> Iterator[Any]:
        return iter(self.content)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Vector):
            return False
        return self.column == other.column and self.content == other.content

    def __hash__(self) -> int:
        return hash((self.content, self.column))

    def __str__(self) -> str:
        strs = [str(v) for v in self.content]
        if not self.column or len(strs) < 2:
            return "[ " + "".join(f"{s} " for s in strs) + "]"
        width = max(len(s) for s in strs)
        lines = []
        for idx, s in enumerate(strs):
            padded = s.ljust(width)
            if idx == 0:
                lines.append(f"⎡ {padded} ⎤")
            elif idx == len(strs) - 1:
                lines.append(f"⎣ {padded} ⎦")
            else:
                lines.append(f"⎢ {padded} ⎥")
        return "\n".join(lines)
