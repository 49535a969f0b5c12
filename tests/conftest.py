"""Test configuration for iomath tests."""

import jax
import pytest

from iomath.core.config import enable_x64, x64_enabled


def pytest_generate_tests(metafunc):
    """Run each test with JIT enabled and disabled."""
    if "jit_mode" in metafunc.fixturenames:
        metafunc.parametrize("jit_mode", ["no_jit", "jit"], indirect=True)


@pytest.fixture
def jit_mode(request):
    """Set JAX JIT compilation mode."""
    jax.config.update("jax_disable_jit", request.param == "no_jit")
    yield request.param
    jax.config.update("jax_disable_jit", False)


@pytest.fixture(scope="session", autouse=True)
def x64():
    """Enable 64-bit element types for the whole session."""
    previous = x64_enabled()
    enable_x64(True)
    yield
    enable_x64(previous)
