"""
Primitives module for element types, identity constants, and shared type aliases.

Every shape is generic over one of the element types below. Each element type
provides its additive and multiplicative identity (``zero``/``one``) and
declares which operator families it supports.
"""

import numbers
from dataclasses import dataclass

import jax.numpy as jnp
import numpy as np
from jaxtyping import Array, Scalar, Shaped

from .config import x64_enabled

# Project type aliases
Scalar = Scalar
Components = Shaped[Array, "N"]
Array = Array


class UnsupportedElementTypeError(TypeError):
    """Raised when an element type is unknown or lacks a required capability."""


# Element kinds able to take part in each operator family
_CAPABILITIES = {
    "arithmetic": frozenset({"float", "signed", "unsigned"}),
    "negation": frozenset({"float", "signed"}),
    "bitwise": frozenset({"signed", "unsigned", "bool"}),
    "shift": frozenset({"signed", "unsigned"}),
}


@dataclass(frozen=True)
class ElementType:
    """Scalar type a shape is instantiated over."""

    name: str
    """Short name used in debug output, e.g. ``f32`` or ``u8``."""

    dtype: np.dtype
    """Array dtype holding the components."""

    kind: str
    """One of ``float``, ``signed``, ``unsigned`` or ``bool``."""

    bits: int
    """Width of a single component in bits."""

    @property
    def supports_arithmetic(self) -> bool:
        return self.kind in _CAPABILITIES["arithmetic"]

    @property
    def supports_negation(self) -> bool:
        return self.kind in _CAPABILITIES["negation"]

    @property
    def supports_bitwise(self) -> bool:
        return self.kind in _CAPABILITIES["bitwise"]

    @property
    def supports_shift(self) -> bool:
        return self.kind in _CAPABILITIES["shift"]

    def require(self, capability: str, operation: str) -> None:
        """Raise if this element type cannot take part in ``operation``."""
        if self.kind not in _CAPABILITIES[capability]:
            raise UnsupportedElementTypeError(
                f"Unsupported element type {self.name} for {operation!r}: "
                f"{capability} operators need one of "
                f"{sorted(_CAPABILITIES[capability])} elements"
            )

    def check_available(self) -> None:
        """Raise if the backend cannot currently materialize this element type."""
        if self.bits == 64 and not x64_enabled():
            raise UnsupportedElementTypeError(
                f"Element type {self.name} requires jax_enable_x64; "
                "call iomath.enable_x64() or set JAX_ENABLE_X64=1"
            )

    def asarray(self, values) -> Array:
        self.check_available()
        return jnp.asarray(values, dtype=self.dtype)

    def accepts(self, dtype) -> bool:
        """Whether values of ``dtype`` convert to this element type without loss of kind."""
        dtype = np.dtype(dtype)
        if jnp.issubdtype(dtype, jnp.complexfloating):
            return False
        if self.kind == "float":
            return True
        if self.kind == "bool":
            return dtype == np.dtype("bool")
        return not jnp.issubdtype(dtype, jnp.inexact)

    def coerce(self, value) -> Array:
        """
        Convert component values to this element type.

        Parameters
        ----------
        value : number or array
            Value to convert. Arrays give one value per batch entry.

        Returns
        -------
        Array
            Array of ``dtype`` with the shape of ``value``.

        Raises
        ------
        TypeError
            If a float value or array is given for an integer or bool element
            type, an integer other than 0 or 1 is given for a bool element
            type, or a complex value is given for any element type.
        """
        if self.kind == "bool" and type(value) is int:
            valid = value in (0, 1)
        else:
            valid = self.accepts(jnp.result_type(value))
        if not valid:
            raise TypeError(
                f"Cannot convert {type(value).__name__} {value!r} to element type {self.name}"
            )
        return self.asarray(value)

    def zero(self) -> Scalar:
        """Additive identity (``False`` for bool)."""
        self.check_available()
        return jnp.zeros((), dtype=self.dtype)

    def one(self) -> Scalar:
        """Multiplicative identity (``True`` for bool)."""
        self.check_available()
        return jnp.ones((), dtype=self.dtype)


F32 = ElementType("f32", np.dtype("float32"), "float", 32)
F64 = ElementType("f64", np.dtype("float64"), "float", 64)
I8 = ElementType("i8", np.dtype("int8"), "signed", 8)
I16 = ElementType("i16", np.dtype("int16"), "signed", 16)
I32 = ElementType("i32", np.dtype("int32"), "signed", 32)
I64 = ElementType("i64", np.dtype("int64"), "signed", 64)
U8 = ElementType("u8", np.dtype("uint8"), "unsigned", 8)
U16 = ElementType("u16", np.dtype("uint16"), "unsigned", 16)
U32 = ElementType("u32", np.dtype("uint32"), "unsigned", 32)
U64 = ElementType("u64", np.dtype("uint64"), "unsigned", 64)
BOOL = ElementType("bool", np.dtype("bool"), "bool", 8)

ELEMENT_TYPES = (F32, F64, I8, I16, I32, I64, U8, U16, U32, U64, BOOL)

_BY_NAME = {element.name: element for element in ELEMENT_TYPES}
_BY_DTYPE = {element.dtype: element for element in ELEMENT_TYPES}

# Neither numpy nor XLA has a 128-bit integer dtype
_UNREPRESENTABLE = frozenset({"i128", "u128", "int128", "uint128"})

ElementLike = ElementType | str | type | np.dtype


def resolve_element(spec: ElementLike) -> ElementType:
    """
    Look up the element type described by ``spec``.

    Parameters
    ----------
    spec : ElementType, str, dtype or scalar type
        Short name (``"f32"``, ``"u8"``), dtype name (``"float32"``), dtype
        object, or scalar type (``jnp.int8``, ``np.uint16``, ``bool``).
        Short names take precedence over numpy's character codes, so ``"i8"``
        is the 8-bit integer.

    Returns
    -------
    ElementType
        The matching supported element type.

    Raises
    ------
    UnsupportedElementTypeError
        If ``spec`` does not name a supported element type.
    """
    if isinstance(spec, ElementType):
        return spec
    # np.dtype(None) would silently mean float64
    if spec is None:
        raise UnsupportedElementTypeError("Unsupported element type None")
    if isinstance(spec, str):
        key = spec.lower()
        if key in _UNREPRESENTABLE:
            raise UnsupportedElementTypeError(
                f"Unsupported element type {spec!r}: 128-bit integers have no JAX dtype"
            )
        if key in _BY_NAME:
            return _BY_NAME[key]
    try:
        dtype = np.dtype(spec)
    except TypeError as exc:
        raise UnsupportedElementTypeError(f"Unsupported element type {spec!r}") from exc
    element = _BY_DTYPE.get(dtype)
    if element is None:
        raise UnsupportedElementTypeError(f"Unsupported element type {spec!r} ({dtype})")
    return element


def zero_of(spec: ElementLike) -> Scalar:
    """Return the additive identity of an element type as a 0-d array."""
    return resolve_element(spec).zero()


def one_of(spec: ElementLike) -> Scalar:
    """Return the multiplicative identity of an element type as a 0-d array."""
    return resolve_element(spec).one()


def is_scalar(value) -> bool:
    """Whether ``value`` can be broadcast across every component of a shape."""
    if isinstance(value, (numbers.Number, np.generic)):
        return True
    return isinstance(value, (Array, np.ndarray)) and value.ndim == 0
