"""Error classes shared by the test modules."""


class CustomError(Exception):
    """Application error used throughout the tests."""


class CustomSubError(CustomError):
    """Subclass of CustomError."""


class UnrelatedError(Exception):
    """Error with no relation to CustomError."""
