"""
Tests for picotest/registration.py
"""
import pytest

from picotest.assertions import expect_eq
from picotest.fixture import TestFixture
from picotest.registration import TEST, TEST_F
from picotest.registry import Registry


@pytest.fixture
def registry() -> Registry:
    return Registry()


def test_test_decorator_registers(registry: Registry):
    @TEST("Math", registry=registry)
    def adds():
        expect_eq(2, 1 + 1)

    (testcase,) = registry.cases
    assert testcase.name == "Math"
    assert [t.name for t in testcase.tests] == ["adds"]
    assert testcase.tests[0].func is adds


def test_test_decorator_custom_name(registry: Registry):
    @TEST("Math", "addition", registry=registry)
    def adds():
        pass

    assert registry.find("Math").tests[0].name == "addition"
    adds()


def test_test_decorator_uses_singleton():
    @TEST("Global")
    def t():
        pass

    assert Registry.get_instance().find("Global") is not None


def test_fixture_decorator(registry: Registry):
    """
    Test TEST_F.
    Verify that each test gets a fresh fixture and the case is the class name.
    """
    instances = []

    class Stack(TestFixture):
        def setup(self) -> None:
            self.items = [1]
            instances.append(self)

        def teardown(self) -> None:
            self.items.append("torn down")

    @TEST_F(Stack, registry=registry)
    def push(self):
        self.items.append(2)
        expect_eq(2, len(self.items))

    @TEST_F(Stack, registry=registry)
    def empty(self):
        expect_eq(0, len(self.items))

    (testcase,) = registry.cases
    assert testcase.name == "Stack"
    assert [t.name for t in testcase.tests] == ["push", "empty"]

    registry.run()
    assert len(instances) == 2
    assert instances[0] is not instances[1]
    assert isinstance(instances[0], Stack)
    assert instances[0].items == [1, 2, "torn down"]
    assert testcase.tests[0].successful() is True
    assert [f.message for f in testcase.tests[1].failures] == [
        "Expected:0 == len(self.items), Actual:0 == 1"
    ]
