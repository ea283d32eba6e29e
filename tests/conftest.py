"""Pytest configuration and shared fixtures."""

import pytest

from civic_routing.domain.entities.department import Department
from civic_routing.domain.policies.keyword_rules import default_rule_set


@pytest.fixture
def rules():
    return default_rule_set()


@pytest.fixture
def departments() -> list[Department]:
    """Bengaluru-area departments, one per stock rule."""
    return [
        Department(id=1, name="Sanitation", latitude=12.9716, longitude=77.5946),
        Department(id=2, name="Water", latitude=12.9352, longitude=77.6245),
        Department(id=3, name="Electricity", latitude=13.0358, longitude=77.5970),
        Department(id=4, name="PWD", latitude=12.9279, longitude=77.6271),
    ]
