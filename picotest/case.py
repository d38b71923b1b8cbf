"""
Module defining an ordered group of tests sharing a case name.
"""

from __future__ import annotations

from typing import TextIO

from picotest import context
from picotest.colored_output import Color, print_colored
from picotest.unit_test import Test


class TestCase:
    """
    Ordered group of tests registered under the same case name.

    Attributes
    ----------
    name : str
        Case name, the lookup key within the Registry
    tests : list[Test]
        Tests in registration order
    executed : bool
        Whether run() completed
    """
    # Prevent pytest from collecting this as a test class (it has an __init__)
    __test__ = False

    def __init__(self, name: str) -> None:
        self.name: str = name
        self.tests: list[Test] = []
        self.executed: bool = False


    def add(self, test: Test) -> None:
        self.tests.append(test)


    def run(self, verbose: bool = False) -> None:
        """
        Run every test of this case in registration order.

        Parameters
        ----------
        verbose : bool, optional
            Print each test name before running it, by default False
        """
        context.set_current_test_case(self)
        for test in self.tests:
            if verbose:
                print(f"Running: {self.name}.{test.name}")
            test.run()
        self.executed = True


    def successful(self) -> bool:
        return self.executed and all(test.successful() for test in self.tests)


    def report_failures(self, sink: TextIO) -> None:
        """
        Write the ``[ FAILED ]`` header and the failures of unsuccessful tests.

        Parameters
        ----------
        sink : TextIO
            Output stream
        """
        print_colored(Color.RED, "[ FAILED ] ", file=sink)
        sink.write(self.name + "\n")
        for test in self.tests:
            if not test.successful():
                test.report_failures(sink)
