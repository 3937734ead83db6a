class MutError(Exception):
    """Base class for everything mutkit raises on purpose."""


class ConfigurationError(MutError, TypeError):
    """Suite options were not passed as a mapping."""


class FormatError(MutError, ValueError):
    """A format directive resolved to an unusable width or precision."""


class AssertionAbort(MutError, AssertionError):
    """Ends the current test body after a failing assertion."""
    __test__ = False

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class ExplicitFailure(AssertionAbort):
    """Raised by TestRunner.fail()."""
