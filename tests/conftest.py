"""
Copyright (c) 2019-2020, the Decred developers
See LICENSE for details
"""

import random

import pytest

from tinyecc.util import helpers


# Seed initialization is delegated to tests.
# random.seed(0)


@pytest.fixture
def randBytes():
    def _randBytes(low=0, high=50):
        return bytes(random.randint(0, 255) for _ in range(random.randint(low, high)))

    return _randBytes


@pytest.fixture
def randElement():
    def _randElement(field):
        return field.element(random.randrange(field.p))

    return _randElement


@pytest.fixture
def randPoint():
    def _randPoint(curve):
        """
        A random point of the prime-order subgroup.
        """
        return curve.generator() * random.randrange(1, curve.order)

    return _randPoint


@pytest.fixture(scope="module")
def prepareLogger(request):
    helpers.prepareLogging()
