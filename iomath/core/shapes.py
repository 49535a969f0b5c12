"""
Shared machinery for fixed-arity shapes (vectors and quaternions).

A shape stores its fields in a one-dimensional array, in declaration order.
Generic shape classes carry no element type; ``Shape[element]`` returns a
cached subclass bound to that element type and registered as a JAX pytree.
"""

import logging
from dataclasses import dataclass
from typing import ClassVar

import chex
import jax
import jax.numpy as jnp
import numpy as np

from .primitives import (
    Components,
    ElementLike,
    ElementType,
    Scalar,
    UnsupportedElementTypeError,
    resolve_element,
)

logger = logging.getLogger(__name__)

_SPECIALIZATIONS: dict[tuple[type, str], type] = {}


def component(index: int, doc: str) -> property:
    """Named read/write access to one field of a shape."""

    def getter(self: "Shape") -> Scalar:
        return self.components[..., index]

    def setter(self: "Shape", value) -> None:
        self.components = self.components.at[..., index].set(self.element.coerce(value))

    return property(getter, setter, doc=doc)


def require_shape(value, shape_name: str) -> "Shape":
    """Return ``value`` if it is a ``shape_name`` shape, raise ``TypeError`` otherwise."""
    if not isinstance(value, Shape) or value.shape_name != shape_name:
        raise TypeError(f"Expected a {shape_name}, got {type(value).__name__}")
    return value


@dataclass(eq=False, repr=False)
class Shape:
    """Fixed-arity tuple of same-typed scalar fields."""

    components: Components
    """Field values in declaration order."""

    field_names: ClassVar[tuple[str, ...]] = ()
    shape_name: ClassVar[str] = "Shape"
    element: ClassVar[ElementType | None] = None

    @classmethod
    def of(cls, element: ElementLike) -> type["Shape"]:
        """
        Return this shape specialized for an element type.

        Parameters
        ----------
        element : ElementLike
            Element type, its name, or a dtype.

        Returns
        -------
        type
            Subclass of the generic shape with ``element`` bound. Repeated
            calls return the same class.
        """
        generic = cls._generic()
        element = resolve_element(element)
        key = (generic, element.name)
        specialized = _SPECIALIZATIONS.get(key)
        if specialized is None:
            name = f"{generic.__name__}[{element.name}]"
            specialized = type(
                name,
                (generic,),
                {"element": element, "__qualname__": name, "__module__": generic.__module__},
            )
            jax.tree_util.register_dataclass(
                specialized, data_fields=["components"], meta_fields=[]
            )
            _SPECIALIZATIONS[key] = specialized
            logger.debug("Specialized %s for element type %s", generic.shape_name, element.name)
        return specialized

    def __class_getitem__(cls, element: ElementLike) -> type["Shape"]:
        return cls.of(element)

    @classmethod
    def _generic(cls) -> type["Shape"]:
        return cls.__base__ if cls.element is not None else cls

    @classmethod
    def _bound_element(cls) -> ElementType:
        if cls.element is None:
            raise UnsupportedElementTypeError(
                f"{cls.__name__} has no element type; use {cls.__name__}[element] "
                f"or an alias such as {cls.shape_name}"
            )
        return cls.element

    @classmethod
    def _bind(cls, *parts) -> type["Shape"]:
        """Bound class for building from ``parts``, taking the element from the first shape."""
        if cls.element is not None:
            return cls
        for part in parts:
            if isinstance(part, Shape):
                return cls.of(part.element)
        return cls

    @classmethod
    def _check_compatible(cls, part: "Shape") -> None:
        if part.element != cls.element:
            raise TypeError(
                f"Cannot build {cls.shape_name}<{cls.element.name}> from "
                f"{part.shape_name}<{part.element.name}>"
            )

    @classmethod
    def _assemble(cls, *parts) -> "Shape":
        """
        Concatenate shapes and values, in order, into a new shape.

        Values may be arrays, and shapes may carry leading batch axes. All
        leading axes are broadcast together before the fields are joined.
        """
        target = cls._bind(*parts)
        element = target._bound_element()
        pieces = []
        for part in parts:
            if isinstance(part, Shape):
                target._check_compatible(part)
                pieces.append(part.components)
            else:
                pieces.append(element.coerce(part)[..., None])
        batch = jnp.broadcast_shapes(*(piece.shape[:-1] for piece in pieces))
        pieces = [jnp.broadcast_to(piece, batch + piece.shape[-1:]) for piece in pieces]
        components = jnp.concatenate(pieces, axis=-1)
        chex.assert_shape(components, (*batch, len(target.field_names)))
        return target(components)

    @classmethod
    def _select(cls, source: "Shape", names: tuple[str, ...]) -> "Shape":
        """Copy the named fields of ``source``, in the given order, into a new shape."""
        target = cls._bind(source)
        target._bound_element()
        target._check_compatible(source)
        indices = np.array([source.field_names.index(name) for name in names])
        return target(source.components[..., indices])

    @classmethod
    def from_array(cls, array) -> "Shape":
        """
        Build a shape from an array holding one value per field.

        Parameters
        ----------
        array : array-like
            One-dimensional array with as many entries as the shape has fields.
            Generic shapes take their element type from the array's dtype.

        Returns
        -------
        Shape
            New shape owning a copy of the values.

        Raises
        ------
        AssertionError
            If ``array`` does not have shape ``(len(field_names),)``.
        TypeError
            If the array's dtype would lose its kind on conversion, e.g. floats
            onto an integer shape.
        """
        array = jnp.asarray(array)
        chex.assert_shape(array, (len(cls.field_names),))
        target = cls if cls.element is not None else cls.of(array.dtype)
        if not target.element.accepts(array.dtype):
            raise TypeError(
                f"Cannot convert {array.dtype} array to {target.shape_name}<{target.element.name}>"
            )
        return target(target.element.asarray(array))

    def to_array(self) -> Components:
        return self.components

    @property
    def dtype(self) -> np.dtype:
        return self.element.dtype

    def copy(self) -> "Shape":
        """Independent copy; later mutation of either shape leaves the other untouched."""
        return type(self)(self.components)

    def __copy__(self) -> "Shape":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "Shape":
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(jnp.array_equal(self.components, other.components))

    __hash__ = None

    def __repr__(self) -> str:
        # Field axis first so batched shapes print one array per field
        values = np.moveaxis(np.asarray(self.components), -1, 0)
        body = ", ".join(f"{name}: {value!s}" for name, value in zip(self.field_names, values))
        return f"{self.shape_name}<{self.element.name}> {{ {body} }}"
