import numpy as np
import pytest

from chromakit import AlphaProfile, RangeRegistry


@pytest.fixture
def percent_ranges():
    """Registry with alpha in [0, 100]."""
    return RangeRegistry.from_profile(AlphaProfile.PERCENTAGE)


@pytest.fixture
def generator():
    return np.random.default_rng(1234)
