"""
Module providing the base class for tests sharing setup and teardown.
"""


class TestFixture:
    """
    Per-test scope running ``setup`` -> ``test_body`` -> ``teardown``.

    A fresh instance is created for every registered test. Subclasses
    override setup() and teardown(); the registration hook supplies
    test_body().
    """
    __test__ = False

    def setup(self) -> None:
        pass


    def teardown(self) -> None:
        pass


    def test_body(self) -> None:
        raise NotImplementedError


    def execute(self) -> None:
        """
        Run the test body between setup and teardown.

        teardown() is skipped when setup() raised, and runs whenever setup()
        completed, even if the body was ended by a fatal assertion.
        """
        self.setup()
        try:
            self.test_body()
        finally:
            self.teardown()
