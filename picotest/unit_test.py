"""
Module defining a single named test and its recorded failures.
"""

from __future__ import annotations

from typing import Callable, TextIO

from picotest import context
from picotest.failure import Failure

TestFunc = Callable[[], None]


class FatalFailure(BaseException):
    """
    Ends the running test body after a fatal assertion failed.

    The failure has already been recorded when this is raised. Derived from
    BaseException so `except Exception` in a test body does not swallow it.
    """
    def __init__(self, failure: Failure) -> None:
        super().__init__(failure.message)
        self.failure: Failure = failure


class Test:
    """
    One named test function with the failures it recorded.

    Attributes
    ----------
    name : str
        Name of the test
    func : TestFunc
        Callable run by the test
    executed : bool
        Whether run() completed
    failures : list[Failure]
        Failures recorded while the test was running, in order
    """
    # Prevent pytest from collecting this as a test class (it has an __init__)
    __test__ = False

    def __init__(self, name: str, func: TestFunc) -> None:
        self.name: str = name
        self.func: TestFunc = func
        self.executed: bool = False
        self.failures: list[Failure] = []


    def run(self) -> None:
        """
        Install this test as the current one and call its function.

        A fatal assertion ends the function early; any other exception
        propagates to the caller and leaves the test unexecuted.
        """
        context.set_current_test(self)
        try:
            self.func()
        except FatalFailure:
            pass
        self.executed = True


    def successful(self) -> bool:
        return self.executed and not self.failures


    def record_failure(
        self,
        file: str,
        line: int,
        expected: str,
        actual: str,
    ) -> Failure:
        """
        Append a failure to this test.

        Parameters
        ----------
        file : str
            Source file of the assertion
        line : int
            Line number of the assertion
        expected : str
            Source text of the asserted condition
        actual : str
            Rendering of the evaluated operands

        Returns
        -------
        Failure
            The recorded failure
        """
        failure: Failure = Failure.from_comparison(file, line, expected, actual)
        self.failures.append(failure)
        return failure


    def format_failure(self, failure: Failure) -> str:
        return f"{self.name} : {failure.file}({failure.line}): error: {failure.message}"


    def report_failures(self, sink: TextIO) -> None:
        """
        Write one line per recorded failure to ``sink``.
        """
        for failure in self.failures:
            sink.write(self.format_failure(failure) + "\n")


    def __repr__(self) -> str:
        return f"Test({self.name!r}, executed={self.executed}, failures={len(self.failures)})"
