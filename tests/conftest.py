import random

import pytest

from padelpairing.controllers.session import preset_config


def make_roster(size):
    return [f"Player {i}" for i in range(1, size + 1)]


@pytest.fixture
def roster12():
    return make_roster(12)


@pytest.fixture
def config12():
    return preset_config(12)


@pytest.fixture
def rng():
    return random.Random(2025)
