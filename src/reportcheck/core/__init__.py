"""Core models, ports and value matching for reported-error assertions."""

from reportcheck.core.models import (
    ErrorInstance,
    ErrorKind,
    Expectation,
    NoExpectation,
    Pattern,
    ReportEvent,
    Tag,
    expectation_from,
    message_of,
)
from reportcheck.core.ports import (
    ErrorReporterPort,
    ErrorSubscriberPort,
    ValueMatcherPort,
)
from reportcheck.core.subscriber import ErrorSubscriber
from reportcheck.core.values import HamcrestValueMatcher, values_match

__all__ = [
    "ErrorInstance",
    "ErrorKind",
    "ErrorReporterPort",
    "ErrorSubscriber",
    "ErrorSubscriberPort",
    "Expectation",
    "HamcrestValueMatcher",
    "NoExpectation",
    "Pattern",
    "ReportEvent",
    "Tag",
    "ValueMatcherPort",
    "expectation_from",
    "message_of",
    "values_match",
]
