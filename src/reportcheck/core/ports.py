"""Port interfaces for the error reporter and value matching.

These protocols define the contracts the matcher depends on.
The core domain depends only on these interfaces, not concrete implementations.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ErrorSubscriberPort(Protocol):
    """Port for observers receiving error reports.

    Examples: ErrorSubscriber.
    """

    def report(self, error: object, attributes: dict[str, object]) -> None:
        """Receive a single error report."""
        ...


@runtime_checkable
class ErrorReporterPort(Protocol):
    """Port for a centralized error-reporting facility.

    Adapters implementing this protocol fan out every report to the
    currently subscribed observers, synchronously.
    Examples: InMemoryErrorReporter.
    """

    def subscribe(self, subscriber: ErrorSubscriberPort) -> None:
        """Register an observer for subsequent reports."""
        ...

    def unsubscribe(self, subscriber: ErrorSubscriberPort) -> None:
        """Deregister a previously registered observer."""
        ...

    def report(self, error: object, **attributes: object) -> None:
        """Report an error to every registered observer."""
        ...


@runtime_checkable
class ValueMatcherPort(Protocol):
    """Port for comparing an expected value against an actual value.

    Examples: HamcrestValueMatcher.
    """

    def values_match(self, expected: object, actual: object) -> bool:
        """Return True if actual satisfies expected."""
        ...
