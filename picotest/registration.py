"""
Decorators registering test functions when their module is imported.
"""

from typing import Callable, TypeVar

from picotest.fixture import TestFixture
from picotest.registry import Registry, register_test

F = TypeVar("F", bound=Callable[..., None])


def TEST(
    case_name: str,
    test_name: str | None = None,
    registry: Registry | None = None,
) -> Callable[[F], F]:
    """
    Register a plain function as a test of ``case_name``.

    Parameters
    ----------
    case_name : str
        Name of the test case
    test_name : str | None, optional
        Name of the test, by default the function name
    registry : Registry | None, optional
        Target registry, by default the process-wide one

    Returns
    -------
    Callable[[F], F]
        Decorator returning the function unchanged
    """
    def decorator(func: F) -> F:
        register_test(case_name, test_name or func.__name__, func, registry)
        return func
    return decorator


def TEST_F(
    fixture: type[TestFixture],
    test_name: str | None = None,
    registry: Registry | None = None,
) -> Callable[[F], F]:
    """
    Register a method body as a test using ``fixture`` for setup and teardown.

    The decorated function receives the fixture instance as its only
    argument. The case name is the fixture class name.

    Parameters
    ----------
    fixture : type[TestFixture]
        Fixture class
    test_name : str | None, optional
        Name of the test, by default the function name
    registry : Registry | None, optional
        Target registry, by default the process-wide one

    Returns
    -------
    Callable[[F], F]
        Decorator returning the function unchanged
    """
    def decorator(func: F) -> F:
        name: str = test_name or func.__name__
        test_class: type[TestFixture] = type(
            f"{fixture.__name__}_{name}",
            (fixture,),
            {"test_body": func},
        )

        def invoke() -> None:
            test_class().execute()

        register_test(fixture.__name__, name, invoke, registry)
        return func
    return decorator
