"""
Pytest configuration and fixtures.
"""

import pytest

from picotest.context import TestState
from picotest.registry import Registry
from picotest.unit_test import Test


@pytest.fixture(autouse=True)
def fresh_singletons():
    """
    Give every test an empty Registry and TestState.
    """
    Registry.reset_instance()
    TestState.reset_instance()
    yield
    Registry.reset_instance()
    TestState.reset_instance()


@pytest.fixture
def run_body():
    """
    Run a callable as a picotest Test and return the Test.
    """
    def _run(body, name: str = "body") -> Test:
        test = Test(name, body)
        test.run()
        return test
    return _run
