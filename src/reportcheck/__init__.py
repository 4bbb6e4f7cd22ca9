"""reportcheck - assert that code reports errors instead of raising them."""

from reportcheck.adapters.logging import ErrorReportingHandler
from reportcheck.adapters.reporter import (
    InMemoryErrorReporter,
    get_reporter,
    set_reporter,
)
from reportcheck.core.models import ReportEvent
from reportcheck.core.ports import (
    ErrorReporterPort,
    ErrorSubscriberPort,
    ValueMatcherPort,
)
from reportcheck.core.subscriber import ErrorSubscriber
from reportcheck.core.values import HamcrestValueMatcher, values_match
from reportcheck.expect import BlockExpectation, expect
from reportcheck.matchers import HaveReportedError, have_reported_error

__all__ = [
    # Matchers
    "HaveReportedError",
    "have_reported_error",
    "BlockExpectation",
    "expect",
    # Reporters
    "ErrorReportingHandler",
    "InMemoryErrorReporter",
    "get_reporter",
    "set_reporter",
    # Core
    "ErrorReporterPort",
    "ErrorSubscriber",
    "ErrorSubscriberPort",
    "HamcrestValueMatcher",
    "ReportEvent",
    "ValueMatcherPort",
    "values_match",
]
