"""In-memory error reporter adapter and the process-wide default reporter."""

import logging

from reportcheck.core.ports import ErrorReporterPort, ErrorSubscriberPort

logger = logging.getLogger(__name__)


class InMemoryErrorReporter:
    """In-memory implementation of ErrorReporterPort.

    Dispatches every report synchronously to the subscribers registered
    at the time of the call. Suitable for testing and for applications
    that want a lightweight reporting hub without external services.

    Example:
        ```python
        reporter = InMemoryErrorReporter()
        set_reporter(reporter)

        try:
            charge(order)
        except PaymentError as exc:
            reporter.report(exc, order_id=order.id)
        ```
    """

    def __init__(self) -> None:
        self._subscribers: list[ErrorSubscriberPort] = []

    def subscribe(self, subscriber: ErrorSubscriberPort) -> None:
        """Register a subscriber. Registering the same object twice is a no-op."""
        if any(s is subscriber for s in self._subscribers):
            return
        self._subscribers.append(subscriber)
        logger.debug("Subscribed %r (%d active)", subscriber, len(self._subscribers))

    def unsubscribe(self, subscriber: ErrorSubscriberPort) -> None:
        """Deregister a subscriber. Unknown subscribers are ignored."""
        self._subscribers = [s for s in self._subscribers if s is not subscriber]
        logger.debug("Unsubscribed %r (%d active)", subscriber, len(self._subscribers))

    def report(self, error: object, **attributes: object) -> None:
        """Report an error to every currently registered subscriber."""
        # Snapshot so subscribers may unsubscribe while being notified
        for subscriber in tuple(self._subscribers):
            subscriber.report(error, dict(attributes))

    @property
    def subscribers(self) -> tuple[ErrorSubscriberPort, ...]:
        return tuple(self._subscribers)

    def clear(self) -> None:
        """Drop every registered subscriber."""
        self._subscribers.clear()


_default_reporter: ErrorReporterPort = InMemoryErrorReporter()


def get_reporter() -> ErrorReporterPort:
    """Return the process-wide default reporter."""
    return _default_reporter


def set_reporter(reporter: ErrorReporterPort) -> ErrorReporterPort:
    """Replace the process-wide default reporter.

    Args:
        reporter: Adapter implementing ErrorReporterPort.

    Returns:
        The previously installed reporter, so callers can restore it.

    Raises:
        TypeError: If reporter does not implement ErrorReporterPort.
    """
    global _default_reporter
    if not isinstance(reporter, ErrorReporterPort):
        raise TypeError("reporter must implement subscribe, unsubscribe and report")
    previous = _default_reporter
    _default_reporter = reporter
    return previous
