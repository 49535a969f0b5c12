"""
Fixed-arity vector shapes with componentwise operator algebra.

Fields are ordered x, y, z, w. Every binary operator accepts either a scalar,
which is broadcast to all fields, or a vector of exactly the same shape and
element type. In-place forms (``+=`` and friends) replace the receiver's
components. Operator families are gated by element type: arithmetic needs a
numeric element, bitwise operators need an integer or bool element, shifts an
integer element and negation a signed or float element.
"""

import operator
from collections.abc import Iterator

import jax.numpy as jnp

from . import componentwise
from .primitives import Components, Scalar, is_scalar
from .shapes import Shape, component, require_shape


def _binary_operator(kernel, capability: str, symbol: str):
    """Build the plain and in-place methods for one componentwise operator."""

    def forward(self: "TVector", other) -> "TVector":
        self.element.require(capability, symbol)
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return type(self)(kernel(self.components, operand))

    def inplace(self: "TVector", other) -> "TVector":
        self.element.require(capability, f"{symbol}=")
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        self.components = kernel(self.components, operand)
        return self

    return forward, inplace


class TVector(Shape):
    """Vector behaviour shared by every arity."""

    @classmethod
    def from_scalar(cls, scalar) -> "TVector":
        """Vector whose fields all equal ``scalar``."""
        element = cls._bound_element()
        return cls(jnp.broadcast_to(element.coerce(scalar), (len(cls.field_names),)))

    @classmethod
    def empty(cls) -> "TVector":
        """Vector whose fields all equal the element type's zero."""
        element = cls._bound_element()
        return cls(jnp.broadcast_to(element.zero(), (len(cls.field_names),)))

    def _operand(self, other) -> Components | None:
        if isinstance(other, Shape):
            return other.components if type(other) is type(self) else None
        if is_scalar(other):
            return jnp.broadcast_to(self.element.coerce(other), self.components.shape)
        return None

    def _field_index(self, index) -> int:
        # Indices past the last field saturate to it
        index = operator.index(index)
        if index < 0:
            raise IndexError(f"{self.shape_name} field index must be non-negative, got {index}")
        return min(index, len(self.field_names) - 1)

    def __getitem__(self, index) -> Scalar:
        return self.components[..., self._field_index(index)]

    def __setitem__(self, index, value) -> None:
        index = self._field_index(index)
        self.components = self.components.at[..., index].set(self.element.coerce(value))

    def __len__(self) -> int:
        return len(self.field_names)

    def __iter__(self) -> Iterator[Scalar]:
        return (self.components[..., i] for i in range(len(self.field_names)))

    __add__, __iadd__ = _binary_operator(componentwise.add, "arithmetic", "+")
    __sub__, __isub__ = _binary_operator(componentwise.subtract, "arithmetic", "-")
    __mul__, __imul__ = _binary_operator(componentwise.multiply, "arithmetic", "*")
    __truediv__, __itruediv__ = _binary_operator(componentwise.divide, "arithmetic", "/")
    __mod__, __imod__ = _binary_operator(componentwise.remainder, "arithmetic", "%")
    __and__, __iand__ = _binary_operator(componentwise.bitwise_and, "bitwise", "&")
    __or__, __ior__ = _binary_operator(componentwise.bitwise_or, "bitwise", "|")
    __xor__, __ixor__ = _binary_operator(componentwise.bitwise_xor, "bitwise", "^")
    __lshift__, __ilshift__ = _binary_operator(componentwise.shift_left, "shift", "<<")
    __rshift__, __irshift__ = _binary_operator(componentwise.shift_right, "shift", ">>")

    def __neg__(self) -> "TVector":
        self.element.require("negation", "-")
        return type(self)(componentwise.negate(self.components))


class TVector2(TVector):
    """Two-field vector (x, y)."""

    field_names = ("x", "y")
    shape_name = "Vector2"

    x = component(0, "First field.")
    y = component(1, "Second field.")

    @classmethod
    def new(cls, x, y) -> "TVector2":
        return cls._assemble(x, y)

    @classmethod
    def from_vector_3(cls, vector: "TVector3") -> "TVector2":
        """Vector2 holding the x and y of a Vector3."""
        return cls._select(require_shape(vector, "Vector3"), ("x", "y"))

    @classmethod
    def from_vector_4(cls, vector: "TVector4") -> "TVector2":
        """Vector2 holding the x and y of a Vector4."""
        return cls._select(require_shape(vector, "Vector4"), ("x", "y"))

    @classmethod
    def from_quaternion(cls, quaternion: Shape) -> "TVector2":
        """Vector2 holding the x and y of a quaternion."""
        return cls._select(require_shape(quaternion, "Quaternion"), ("x", "y"))


class TVector3(TVector):
    """Three-field vector (x, y, z)."""

    field_names = ("x", "y", "z")
    shape_name = "Vector3"

    x = component(0, "First field.")
    y = component(1, "Second field.")
    z = component(2, "Third field.")

    @classmethod
    def new(cls, x, y, z) -> "TVector3":
        return cls._assemble(x, y, z)

    @classmethod
    def from_vector_2(cls, vector: TVector2) -> "TVector3":
        """
        Widen a Vector2, padding z with zero.

        Parameters
        ----------
        vector : TVector2
            Source vector.

        Returns
        -------
        TVector3
            ``(vector.x, vector.y, 0)`` with the source's element type.
        """
        target = cls._bind(require_shape(vector, "Vector2"))
        return target._assemble(vector, target._bound_element().zero())

    @classmethod
    def from_vector_4(cls, vector: "TVector4") -> "TVector3":
        """Vector3 holding the x, y and z of a Vector4."""
        return cls._select(require_shape(vector, "Vector4"), ("x", "y", "z"))

    @classmethod
    def from_value_vector(cls, value, vector: TVector2) -> "TVector3":
        """``(value, vector.x, vector.y)``."""
        return cls._assemble(value, require_shape(vector, "Vector2"))

    @classmethod
    def from_vector_value(cls, vector: TVector2, value) -> "TVector3":
        """``(vector.x, vector.y, value)``."""
        return cls._assemble(require_shape(vector, "Vector2"), value)

    @classmethod
    def from_quaternion(cls, quaternion: Shape) -> "TVector3":
        return cls._select(require_shape(quaternion, "Quaternion"), ("x", "y", "z"))


class TVector4(TVector):
    """Four-field vector (x, y, z, w)."""

    field_names = ("x", "y", "z", "w")
    shape_name = "Vector4"

    x = component(0, "First field.")
    y = component(1, "Second field.")
    z = component(2, "Third field.")
    w = component(3, "Fourth field.")

    @classmethod
    def new(cls, x, y, z, w) -> "TVector4":
        return cls._assemble(x, y, z, w)

    @classmethod
    def from_vector_2(cls, vector: TVector2) -> "TVector4":
        """Widen a Vector2, padding z and w with zero."""
        target = cls._bind(require_shape(vector, "Vector2"))
        zero = target._bound_element().zero()
        return target._assemble(vector, zero, zero)

    @classmethod
    def from_vector_3(cls, vector: TVector3) -> "TVector4":
        """Widen a Vector3, padding w with zero."""
        target = cls._bind(require_shape(vector, "Vector3"))
        return target._assemble(vector, target._bound_element().zero())

    @classmethod
    def from_two_values_vector(cls, first, second, vector: TVector2) -> "TVector4":
        """``(first, second, vector.x, vector.y)``."""
        return cls._assemble(first, second, require_shape(vector, "Vector2"))

    @classmethod
    def from_value_vector_value(cls, first, vector: TVector2, second) -> "TVector4":
        """``(first, vector.x, vector.y, second)``."""
        return cls._assemble(first, require_shape(vector, "Vector2"), second)

    @classmethod
    def from_vector_two_values(cls, vector: TVector2, first, second) -> "TVector4":
        """``(vector.x, vector.y, first, second)``."""
        return cls._assemble(require_shape(vector, "Vector2"), first, second)

    @classmethod
    def from_two_vectors(cls, first: TVector2, second: TVector2) -> "TVector4":
        """``(first.x, first.y, second.x, second.y)``."""
        return cls._assemble(require_shape(first, "Vector2"), require_shape(second, "Vector2"))

    @classmethod
    def from_value_vector(cls, value, vector: TVector3) -> "TVector4":
        """``(value, vector.x, vector.y, vector.z)``."""
        return cls._assemble(value, require_shape(vector, "Vector3"))

    @classmethod
    def from_vector_value(cls, vector: TVector3, value) -> "TVector4":
        """``(vector.x, vector.y, vector.z, value)``."""
        return cls._assemble(require_shape(vector, "Vector3"), value)

    @classmethod
    def from_quaternion(cls, quaternion: Shape) -> "TVector4":
        """
        Vector4 from a quaternion's fields.

        Parameters
        ----------
        quaternion : TQuaternion
            Source quaternion [w, x, y, z].

        Returns
        -------
        TVector4
            ``(q.x, q.y, q.z, q.w)``, so the identity quaternion maps to
            ``(0, 0, 0, 1)``.
        """
        return cls._select(require_shape(quaternion, "Quaternion"), ("x", "y", "z", "w"))


# Per element type
F32Vector2 = TVector2["f32"]
F64Vector2 = TVector2["f64"]
I8Vector2 = TVector2["i8"]
I16Vector2 = TVector2["i16"]
I32Vector2 = TVector2["i32"]
I64Vector2 = TVector2["i64"]
U8Vector2 = TVector2["u8"]
U16Vector2 = TVector2["u16"]
U32Vector2 = TVector2["u32"]
U64Vector2 = TVector2["u64"]
BVector2 = TVector2["bool"]

F32Vector3 = TVector3["f32"]
F64Vector3 = TVector3["f64"]
I8Vector3 = TVector3["i8"]
I16Vector3 = TVector3["i16"]
I32Vector3 = TVector3["i32"]
I64Vector3 = TVector3["i64"]
U8Vector3 = TVector3["u8"]
U16Vector3 = TVector3["u16"]
U32Vector3 = TVector3["u32"]
U64Vector3 = TVector3["u64"]
BVector3 = TVector3["bool"]

F32Vector4 = TVector4["f32"]
F64Vector4 = TVector4["f64"]
I8Vector4 = TVector4["i8"]
I16Vector4 = TVector4["i16"]
I32Vector4 = TVector4["i32"]
I64Vector4 = TVector4["i64"]
U8Vector4 = TVector4["u8"]
U16Vector4 = TVector4["u16"]
U32Vector4 = TVector4["u32"]
U64Vector4 = TVector4["u64"]
BVector4 = TVector4["bool"]

# Default float, signed and unsigned vectors
Vector2 = FVector2 = F32Vector2
IVector2 = I32Vector2
UVector2 = U32Vector2

Vector3 = FVector3 = F32Vector3
IVector3 = I32Vector3
UVector3 = U32Vector3

Vector4 = FVector4 = F32Vector4
IVector4 = I32Vector4
UVector4 = U32Vector4
