"""
Module providing the process exit codes of a test run.
"""
from enum import Enum


class ExitStatus(Enum):
    """
    Exit code returned by run_all and the picotest command.
    """
    SUCCESS = 0
    FAILURE = 1
