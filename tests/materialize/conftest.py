"""Shared fixtures for materialize tests."""

import os
import sys

import pytest

# Ensure tests/materialize/ is on sys.path so test files can import
# fake_command_runner and click_input unambiguously.
sys.path.insert(0, os.path.dirname(__file__))

from fake_command_runner import FakeCommandRunner  # noqa: E402, F401
from click_input import invoke_with_input  # noqa: E402, F401


def pytest_collection_modifyitems(items):
    for item in items:
        if "tests/materialize" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
