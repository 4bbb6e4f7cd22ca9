"""Adapters connecting reportcheck to reporters, logging and pytest."""

from reportcheck.adapters.logging import ErrorReportingHandler
from reportcheck.adapters.reporter import (
    InMemoryErrorReporter,
    get_reporter,
    set_reporter,
)

__all__ = [
    "ErrorReportingHandler",
    "InMemoryErrorReporter",
    "get_reporter",
    "set_reporter",
]
