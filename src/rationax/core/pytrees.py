from __future__ import annotations
from typing import Any, Self, TypeVar

import pytreeclass as tc
from pytreeclass._src.code_build import (
    NULL,
    Field,
    build_init_method,
    convert_hints_to_fields,
    dataclass_transform,
)
from pytreeclass._src.code_build import (
    field as tc_field,
)


class TreeClass(tc.TreeClass):
    """Immutable pytree base class. Attributes can only be set during initialization, updates return copies."""

    def updated_copy(self, **kwargs: Any) -> Self:
        """Returns an updated copy of the tree with modified top-level attributes.

        Args:
            **kwargs: Dictionary mapping immediate attribute names to their new values.

        Returns:
            Self: A newly instantiated object with the updated attributes.
        """
        init_args = {f.name: getattr(self, f.name) for f in tc.fields(self) if f.init}
        unknown = set(kwargs) - set(init_args)
        if unknown:
            raise AttributeError(f"{self.__class__.__name__} has no init attributes {sorted(unknown)}")
        init_args.update(kwargs)
        return self.__class__(**init_args)


T = TypeVar("T")


def frozen_field(*, default: Any = NULL) -> Any:
    """Keyword-only field that is frozen on set and unfrozen on get. Frozen values are static parts of the pytree,
    so they are not leaves and jax transformations leave them untouched.
    """
    return tc_field(
        default=default,
        kind="KW_ONLY",
        on_setattr=[tc.freeze],
        on_getattr=[tc.unfreeze],
    )


@dataclass_transform(
    field_specifiers=(Field, tc_field, frozen_field),
    kw_only_default=True,
)
def autoinit(klass: type[T]) -> type[T]:
    """Wrapper around tc.autoinit that preserves parameter requirement information"""
    return (
        klass
        # a user-defined __init__ is kept as is
        if "__init__" in vars(klass)
        # build __init__ from the hints of this class and its autoinit base classes
        else build_init_method(convert_hints_to_fields(klass))
    )
