"""
Module providing the process-wide catalogue of test cases and the driver.
"""

from __future__ import annotations

import sys
from typing import TextIO

from picotest import context
from picotest.case import TestCase
from picotest.exit_status import ExitStatus
from picotest.unit_test import Test, TestFunc


class Registry:
    """
    Catalogue of test cases in first-registration order.

    Tests for an unseen case name open a new case at the end; tests for a
    known case name are appended to it. The singleton returned by
    get_instance() is created lazily and depends on nothing else, so it can
    be registered into while modules are still being imported.

    Attributes
    ----------
    verbose : bool
        Print each test name as it runs
    """
    _instance: Registry | None = None

    def __init__(self, verbose: bool = False) -> None:
        self.verbose: bool = verbose
        self._cases: list[TestCase] = []


    @classmethod
    def get_instance(cls) -> Registry:
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance


    @classmethod
    def reset_instance(cls) -> None:
        """
        Drop the singleton; the next access creates an empty registry.
        """
        cls._instance = None


    @property
    def cases(self) -> tuple[TestCase, ...]:
        return tuple(self._cases)


    def find(self, case_name: str) -> TestCase | None:
        """
        Look up a test case by name.

        Parameters
        ----------
        case_name : str
            Name of the case

        Returns
        -------
        TestCase | None
            The case, or None when no case has that name
        """
        for testcase in self._cases:
            if testcase.name == case_name:
                return testcase
        return None


    def add(self, case_name: str, test: Test) -> None:
        """
        Register ``test`` under ``case_name``.

        Parameters
        ----------
        case_name : str
            Name of the case the test belongs to
        test : Test
            Test to append
        """
        found: TestCase | None = self.find(case_name)
        if found is None:
            found = TestCase(case_name)
            self._cases.append(found)
        found.add(test)


    def run(self) -> None:
        """
        Run every case in registration order.
        """
        state: context.TestState = context.TestState.get_instance()
        try:
            for testcase in self._cases:
                context.set_current_test_case(testcase)
                testcase.run(verbose=self.verbose)
        finally:
            state.testcase = None
            state.test = None


    def num_total(self) -> int:
        return len(self._cases)


    def num_success(self) -> int:
        return sum(1 for testcase in self._cases if testcase.successful())


    def num_failed(self) -> int:
        return self.num_total() - self.num_success()


    def fail(self) -> bool:
        """
        Whether at least one registered case is unsuccessful.
        """
        return self.num_total() > 0 and self.num_failed() > 0


    def report(self, sink: TextIO | None = None) -> None:
        """
        Write the run summary.

        Counts are per test case: a case with any failing test counts once.

        Parameters
        ----------
        sink : TextIO | None, optional
            Output stream, by default the current ``sys.stdout``
        """
        out: TextIO = sink if sink is not None else sys.stdout
        failed: int = self.num_failed()

        if failed:
            out.write(f"{failed} of {self.num_total()} tests failed.\n")
            for testcase in self._cases:
                if not testcase.successful():
                    testcase.report_failures(out)
        else:
            out.write(f"{self.num_success()} tests success.\n")
        out.flush()


def register_test(
    case_name: str,
    test_name: str,
    body: TestFunc,
    registry: Registry | None = None,
) -> Test:
    """
    Add a test to the registry.

    Parameters
    ----------
    case_name : str
        Name of the case the test belongs to
    test_name : str
        Name of the test
    body : TestFunc
        Callable run by the test
    registry : Registry | None, optional
        Target registry, by default the process-wide one

    Returns
    -------
    Test
        The registered test
    """
    test: Test = Test(test_name, body)
    target: Registry = registry if registry is not None else Registry.get_instance()
    target.add(case_name, test)
    return test


def run_all(sink: TextIO | None = None, registry: Registry | None = None) -> int:
    """
    Run every registered test and write the report.

    Parameters
    ----------
    sink : TextIO | None, optional
        Output stream for the report, by default the current ``sys.stdout``
    registry : Registry | None, optional
        Registry to run, by default the process-wide one

    Returns
    -------
    int
        Exit code (0 if all test cases passed, 1 otherwise)
    """
    target: Registry = registry if registry is not None else Registry.get_instance()
    target.run()
    target.report(sink)
    if target.fail():
        return ExitStatus.FAILURE.value
    return ExitStatus.SUCCESS.value


RUN_ALL_TESTS = run_all
