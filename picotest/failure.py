"""
Module defining the failure record produced by a failed assertion.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Failure:
    """
    One recorded assertion mismatch.

    Attributes
    ----------
    file : str
        Source file of the failed assertion
    line : int
        Line number of the failed assertion (1-based)
    message : str
        Rendered ``Expected:..., Actual:...`` message
    """
    file: str
    line: int
    message: str


    @classmethod
    def from_comparison(
        cls,
        file: str,
        line: int,
        expected: str,
        actual: str,
    ) -> "Failure":
        """
        Build a failure from the expected expression and the actual rendering.

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
            Failure whose message is ``Expected:<expected>, Actual:<actual>``
        """
        return cls(file, line, f"Expected:{expected}, Actual:{actual}")
