"""Tests for quaternion module."""

import jax.numpy as jnp
import pytest

from iomath.core.primitives import UnsupportedElementTypeError
from iomath.core.quaternion import F32Quaternion, F64Quaternion, Quaternion, TQuaternion
from iomath.core.vectors import IVector4, Vector3, Vector4


def test_identity() -> None:
    """Test the identity quaternion for several element types."""
    # Standard case 1 - default float quaternion
    q1 = Quaternion.identity()
    assert q1 == Quaternion.new(1.0, 0.0, 0.0, 0.0)
    assert q1.w == 1.0
    assert q1.x == 0.0 and q1.y == 0.0 and q1.z == 0.0

    # Standard case 2 - 64-bit floats
    q2 = F64Quaternion.identity()
    assert q2.dtype == jnp.float64
    assert jnp.array_equal(q2.to_array(), jnp.array([1.0, 0.0, 0.0, 0.0]))

    # Standard case 3 - integer and bool elements use their own one and zero
    assert jnp.array_equal(TQuaternion["i8"].identity().to_array(), jnp.array([1, 0, 0, 0]))
    assert jnp.array_equal(
        TQuaternion["bool"].identity().to_array(), jnp.array([True, False, False, False])
    )

    # Edge case 1 - generic quaternion has no element type
    with pytest.raises(UnsupportedElementTypeError):
        TQuaternion.identity()


def test_aliases() -> None:
    """Test that the default quaternion is the f32 instantiation."""
    assert Quaternion is F32Quaternion
    assert Quaternion is TQuaternion["f32"]
    assert Quaternion.identity().dtype == jnp.float32


def test_equality() -> None:
    """Test structural equality."""
    assert Quaternion.new(0.5, -0.5, 0.25, 1.0) == Quaternion.new(0.5, -0.5, 0.25, 1.0)
    assert Quaternion.new(0.5, -0.5, 0.25, 1.0) != Quaternion.new(0.5, -0.5, 0.25, 2.0)

    # Edge case 1 - different element types or shapes never compare equal
    assert Quaternion.identity() != F64Quaternion.identity()
    assert Quaternion.identity() != Vector4.new(1.0, 0.0, 0.0, 0.0)


def test_from_vector_4() -> None:
    """Test conversion from a Vector4."""
    # Standard case 1 - w moves to the front
    q1 = Quaternion.from_vector_4(Vector4.new(2.0, 3.0, 4.0, 1.0))
    assert q1 == Quaternion.new(1.0, 2.0, 3.0, 4.0)

    # Standard case 2 - inverse of Vector4.from_quaternion
    q2 = Quaternion.new(0.5, -1.5, 2.5, -3.5)
    assert Quaternion.from_vector_4(Vector4.from_quaternion(q2)) == q2
    assert Vector4.from_quaternion(Quaternion.identity()) == Vector4.new(0.0, 0.0, 0.0, 1.0)

    # Edge case 1 - generic quaternion adopts the vector's element type
    q3 = TQuaternion.from_vector_4(IVector4.new(0, 0, 0, 1))
    assert q3 == TQuaternion["i32"].identity()

    # Edge case 2 - only Vector4 is accepted
    with pytest.raises(TypeError):
        Quaternion.from_vector_4(Vector3.new(1.0, 2.0, 3.0))


def test_field_assignment() -> None:
    """Test named field writes."""
    q = Quaternion.identity()
    q.z = 0.5
    q.w = -1.0
    assert q == Quaternion.new(-1.0, 0.0, 0.0, 0.5)


def test_debug_format() -> None:
    """Test the fixed textual representation in w, x, y, z order."""
    expected = "Quaternion<f32> { w: 1.0, x: 0.0, y: 0.0, z: 0.0 }"
    assert repr(Quaternion.identity()) == expected
