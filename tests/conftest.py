"""
Shared fixtures for the clipping showcase tests.
"""
import pytest

from clipping_showcase.core.parsing import resolve_constants
from clipping_showcase.core.path import ScratchPath
from clipping_showcase.core.surface import RasterSurface


@pytest.fixture
def constants():
    """Default dimension table at density 1: 90x90 panels, 8px inset."""
    return resolve_constants(density=1.0)


@pytest.fixture
def surface():
    return RasterSurface(200, 200)


@pytest.fixture
def path():
    return ScratchPath()
