"""
Componentwise kernels shared by every vector shape.

All functions take two arrays of identical shape and dtype (or one, for
``negate``) and follow the element type's native operator. They contain no
Python control flow on values, so they can be wrapped in ``jax.jit`` and
``jax.vmap``.
"""

import jax
import jax.numpy as jnp

from .primitives import Components


def add(a: Components, b: Components) -> Components:
    """Componentwise sum."""
    return jnp.add(a, b)


def subtract(a: Components, b: Components) -> Components:
    """Componentwise difference."""
    return jnp.subtract(a, b)


def multiply(a: Components, b: Components) -> Components:
    """Componentwise product."""
    return jnp.multiply(a, b)


def divide(a: Components, b: Components) -> Components:
    """
    Componentwise quotient.

    Parameters
    ----------
    a : Components
        Dividend.
    b : Components
        Divisor, same shape and dtype as ``a``.

    Returns
    -------
    Components
        Quotient with the dtype of the inputs.

    Notes
    -----
    Floats use IEEE division, so a zero divisor gives inf or NaN. Integers
    round toward zero. Integer division by zero raises no error, unlike
    Python's ``//``; the result is whatever XLA defines for the dtype.
    """
    return jax.lax.div(a, b)


def remainder(a: Components, b: Components) -> Components:
    """
    Componentwise remainder with the sign of the dividend.

    Parameters
    ----------
    a : Components
        Dividend.
    b : Components
        Divisor, same shape and dtype as ``a``.

    Returns
    -------
    Components
        ``a - b * trunc(a / b)`` for integers, ``fmod(a, b)`` for floats.
    """
    return jax.lax.rem(a, b)


def negate(a: Components) -> Components:
    """Componentwise negation."""
    return jnp.negative(a)


def bitwise_and(a: Components, b: Components) -> Components:
    return jnp.bitwise_and(a, b)


def bitwise_or(a: Components, b: Components) -> Components:
    return jnp.bitwise_or(a, b)


def bitwise_xor(a: Components, b: Components) -> Components:
    return jnp.bitwise_xor(a, b)


def shift_left(a: Components, b: Components) -> Components:
    """Componentwise left shift of ``a`` by ``b`` bits."""
    return jnp.left_shift(a, b)


def shift_right(a: Components, b: Components) -> Components:
    """Componentwise right shift, arithmetic for signed and logical for unsigned."""
    return jnp.right_shift(a, b)
