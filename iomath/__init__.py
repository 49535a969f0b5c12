"""iomath - JAX-backed generic vectors and quaternions."""

from iomath.core.config import enable_x64, x64_enabled
from iomath.core.primitives import (
    BOOL,
    ELEMENT_TYPES,
    F32,
    F64,
    I8,
    I16,
    I32,
    I64,
    U8,
    U16,
    U32,
    U64,
    ElementType,
    UnsupportedElementTypeError,
    one_of,
    resolve_element,
    zero_of,
)
from iomath.core.quaternion import F32Quaternion, F64Quaternion, Quaternion, TQuaternion
from iomath.core.vectors import (
    BVector2,
    BVector3,
    BVector4,
    F32Vector2,
    F32Vector3,
    F32Vector4,
    F64Vector2,
    F64Vector3,
    F64Vector4,
    FVector2,
    FVector3,
    FVector4,
    I8Vector2,
    I8Vector3,
    I8Vector4,
    I16Vector2,
    I16Vector3,
    I16Vector4,
    I32Vector2,
    I32Vector3,
    I32Vector4,
    I64Vector2,
    I64Vector3,
    I64Vector4,
    IVector2,
    IVector3,
    IVector4,
    TVector2,
    TVector3,
    TVector4,
    U8Vector2,
    U8Vector3,
    U8Vector4,
    U16Vector2,
    U16Vector3,
    U16Vector4,
    U32Vector2,
    U32Vector3,
    U32Vector4,
    U64Vector2,
    U64Vector3,
    U64Vector4,
    UVector2,
    UVector3,
    UVector4,
    Vector2,
    Vector3,
    Vector4,
)

__all__ = [
    # Configuration
    "enable_x64",
    "x64_enabled",
    # Element types
    "ElementType",
    "UnsupportedElementTypeError",
    "ELEMENT_TYPES",
    "F32",
    "F64",
    "I8",
    "I16",
    "I32",
    "I64",
    "U8",
    "U16",
    "U32",
    "U64",
    "BOOL",
    "resolve_element",
    "zero_of",
    "one_of",
    # Generic shapes
    "TVector2",
    "TVector3",
    "TVector4",
    "TQuaternion",
    # Default vectors
    "Vector2",
    "Vector3",
    "Vector4",
    "FVector2",
    "FVector3",
    "FVector4",
    "IVector2",
    "IVector3",
    "IVector4",
    "UVector2",
    "UVector3",
    "UVector4",
    # Vectors per element type
    "F32Vector2",
    "F32Vector3",
    "F32Vector4",
    "F64Vector2",
    "F64Vector3",
    "F64Vector4",
    "I8Vector2",
    "I8Vector3",
    "I8Vector4",
    "I16Vector2",
    "I16Vector3",
    "I16Vector4",
    "I32Vector2",
    "I32Vector3",
    "I32Vector4",
    "I64Vector2",
    "I64Vector3",
    "I64Vector4",
    "U8Vector2",
    "U8Vector3",
    "U8Vector4",
    "U16Vector2",
    "U16Vector3",
    "U16Vector4",
    "U32Vector2",
    "U32Vector3",
    "U32Vector4",
    "U64Vector2",
    "U64Vector3",
    "U64Vector4",
    "BVector2",
    "BVector3",
    "BVector4",
    # Quaternions
    "Quaternion",
    "F32Quaternion",
    "F64Quaternion",
]
