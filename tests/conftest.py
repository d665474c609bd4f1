"""Shared fixtures for the fpcomponents test suite."""

import pytest

from fpcomponents import DoubleComponents, HalfComponents, SingleComponents

COMPONENT_TYPES = [HalfComponents, SingleComponents, DoubleComponents]


@pytest.fixture(params=COMPONENT_TYPES, ids=lambda cls: cls.precision.name)
def components_type(request):
    return request.param


@pytest.fixture
def precision(components_type):
    return components_type.precision
