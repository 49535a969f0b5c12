"""Runtime configuration for the JAX backend that stores shape components."""

import logging

import jax

logger = logging.getLogger(__name__)


def x64_enabled() -> bool:
    """Return whether 64-bit element types (f64, i64, u64) can be materialized."""
    return bool(jax.config.jax_enable_x64)


def enable_x64(enabled: bool = True) -> None:
    """
    Toggle 64-bit array support in JAX.

    Parameters
    ----------
    enabled : bool
        New value of the ``jax_enable_x64`` flag.

    Notes
    -----
    JAX also reads the ``JAX_ENABLE_X64`` environment variable at import time.
    Shapes built while the flag was on keep their 64-bit components.
    """
    jax.config.update("jax_enable_x64", enabled)
    logger.debug("jax_enable_x64 set to %s", enabled)
