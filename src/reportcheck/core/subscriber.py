"""Subscriber that captures error reports while registered."""

from collections.abc import Mapping

from reportcheck.core.models import ReportEvent


class ErrorSubscriber:
    """Implementation of ErrorSubscriberPort that records every report.

    A fresh subscriber is created for each assertion and discarded after.
    """

    def __init__(self) -> None:
        self._events: list[ReportEvent] = []

    def report(self, error: object, attributes: object = None) -> None:
        """Record an error report.

        Mapping attributes are copied; any other non-None value is kept
        under the "attributes" key.
        """
        if attributes is None:
            recorded: dict[str, object] = {}
        elif isinstance(attributes, Mapping):
            recorded = dict(attributes)
        else:
            recorded = {"attributes": attributes}
        self._events.append(ReportEvent(error=error, attributes=recorded))

    @property
    def events(self) -> tuple[ReportEvent, ...]:
        """Recorded events in report order."""
        return tuple(self._events)

    @property
    def count(self) -> int:
        return len(self._events)

    @property
    def last(self) -> ReportEvent | None:
        """The most recent event, or None when nothing was reported."""
        return self._events[-1] if self._events else None
