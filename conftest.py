"""
Root conftest.py for pytest configuration

Applies markers based on test location so `pytest -m unit` selects the unit suite.
"""
import pytest


def pytest_collection_modifyitems(config, items):
    """Mark everything under tests/unit as a unit test"""
    for item in items:
        if "/tests/unit/" in str(item.fspath).replace("\\", "/"):
            item.add_marker(pytest.mark.unit)
