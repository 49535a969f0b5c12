"""
Quaternion shape for 3D orientation data.

Uses scalar-first format [w, x, y, z]. Only construction, conversion and
equality are provided here; the Hamilton product and friends are out of scope.
"""

from .shapes import Shape, component, require_shape


class TQuaternion(Shape):
    """Quaternion with fields w, x, y, z."""

    field_names = ("w", "x", "y", "z")
    shape_name = "Quaternion"

    w = component(0, "Scalar part.")
    x = component(1, "First vector part.")
    y = component(2, "Second vector part.")
    z = component(3, "Third vector part.")

    @classmethod
    def new(cls, w, x, y, z) -> "TQuaternion":
        return cls._assemble(w, x, y, z)

    @classmethod
    def identity(cls) -> "TQuaternion":
        """
        Return the identity quaternion.

        Returns
        -------
        TQuaternion
            Quaternion [1, 0, 0, 0] built from the element type's one and zero.
        """
        element = cls._bound_element()
        zero = element.zero()
        return cls._assemble(element.one(), zero, zero, zero)

    @classmethod
    def from_vector_4(cls, vector: Shape) -> "TQuaternion":
        """
        Build a quaternion from a Vector4.

        Parameters
        ----------
        vector : TVector4
            Source vector (x, y, z, w).

        Returns
        -------
        TQuaternion
            ``[vector.w, vector.x, vector.y, vector.z]``, the inverse of
            ``TVector4.from_quaternion``.
        """
        return cls._select(require_shape(vector, "Vector4"), ("w", "x", "y", "z"))


F32Quaternion = TQuaternion["f32"]
F64Quaternion = TQuaternion["f64"]

Quaternion = F32Quaternion
