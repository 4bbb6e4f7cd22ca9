"""Matcher asserting that a block reports an error to the error reporter.

Example:
    ```python
    from reportcheck import expect, have_reported_error

    expect(lambda: charge(order)).to(have_reported_error(PaymentError))
    expect(lambda: charge(order)).to(
        have_reported_error(PaymentError("card declined")).with_(order_id=42)
    )
    expect(lambda: noop()).not_to(have_reported_error())
    ```

The matcher is also a hamcrest matcher, so
``assert_that(lambda: charge(order), have_reported_error(PaymentError))``
works as well.
"""

import logging
from collections.abc import Callable, Mapping

from hamcrest.core.base_matcher import BaseMatcher
from hamcrest.core.description import Description

from reportcheck.adapters.reporter import get_reporter
from reportcheck.core.models import (
    ErrorInstance,
    ErrorKind,
    Expectation,
    NoExpectation,
    Pattern,
    expectation_from,
    message_of,
)
from reportcheck.core.ports import ErrorReporterPort, ValueMatcherPort
from reportcheck.core.subscriber import ErrorSubscriber
from reportcheck.core.values import HamcrestValueMatcher

logger = logging.getLogger(__name__)

Block = Callable[[], object]


class HaveReportedError(BaseMatcher):
    """Passes if the block reported an error matching the expectation.

    The expected value selects how the last reported error is compared:

    - ``None``: exactly one error must have been reported.
    - exception class: the error must be an instance of it.
    - exception instance: same class and, unless empty, the same message.
    - compiled regex: the error message must match it.
    - tag (str or Enum member): the error must equal it.
    """

    def __init__(
        self,
        expected: object = None,
        *,
        reporter: ErrorReporterPort | None = None,
        value_matcher: ValueMatcherPort | None = None,
    ) -> None:
        """Initialize the matcher.

        Args:
            expected: Expected error (see class docstring).
            reporter: Reporter to subscribe to. Defaults to the process-wide
                reporter returned by get_reporter() at match time.
            value_matcher: Comparison used for attributes. Defaults to
                HamcrestValueMatcher.
        """
        self._expectation = expectation_from(expected)
        self._attributes: dict[str, object] = {}
        self._reporter = reporter
        self._value_matcher = value_matcher or HamcrestValueMatcher()
        self._subscriber = ErrorSubscriber()

    @property
    def expectation(self) -> Expectation:
        return self._expectation

    @property
    def expected_attributes(self) -> dict[str, object]:
        return dict(self._attributes)

    def with_(
        self, attributes: Mapping[str, object] | None = None, /, **kwargs: object
    ) -> "HaveReportedError":
        """Require the reported error to carry these attributes.

        Calls accumulate; a later value for the same key replaces the earlier one.

        Raises:
            TypeError: If attributes is not a mapping.
        """
        if attributes is not None:
            if not isinstance(attributes, Mapping):
                raise TypeError("attributes must be a mapping")
            self._attributes.update(attributes)
        self._attributes.update(kwargs)
        return self

    def supports_block_expectations(self) -> bool:
        return True

    def _matches(self, block: Block | None) -> bool:
        if block is not None and not callable(block):
            raise TypeError("have_reported_error expects a callable block")
        reporter = self._reporter if self._reporter is not None else get_reporter()
        subscriber = ErrorSubscriber()
        self._subscriber = subscriber
        reporter.subscribe(subscriber)
        try:
            if block is not None:
                block()
            logger.debug("Block reported %d error(s)", subscriber.count)
            return self._evaluate(subscriber)
        finally:
            reporter.unsubscribe(subscriber)

    def _evaluate(self, subscriber: ErrorSubscriber) -> bool:
        if not self._expectation_holds(subscriber):
            return False
        last = subscriber.last
        if self._attributes and last is not None:
            return self.attributes_match(last.attributes)
        return True

    def _expectation_holds(self, subscriber: ErrorSubscriber) -> bool:
        expectation = self._expectation
        if isinstance(expectation, NoExpectation):
            return subscriber.count == 1
        last = subscriber.last
        if last is None:
            return False
        error = last.error
        if isinstance(expectation, ErrorKind):
            return isinstance(error, expectation.kind)
        if isinstance(expectation, ErrorInstance):
            if not isinstance(error, expectation.kind):
                return False
            return not expectation.message or message_of(error) == expectation.message
        if isinstance(expectation, Pattern):
            return expectation.regex.search(message_of(error)) is not None
        return error == expectation.value

    def attributes_match(self, actual: Mapping[str, object]) -> bool:
        """Return True if every expected attribute matches actual."""
        return all(
            self._value_matcher.values_match(value, actual.get(key))
            for key, value in self._attributes.items()
        )

    def unmatched_attributes(self, actual: Mapping[str, object]) -> dict[str, object]:
        """Return the expected attributes that do not match actual."""
        return {
            key: value
            for key, value in self._attributes.items()
            if not self._value_matcher.values_match(value, actual.get(key))
        }

    def failure_message(self) -> str:
        """Explain why the last positive match failed."""
        last = self._subscriber.last
        if last is None:
            return "Expected the block to report an error, but none was reported."
        if self._attributes:
            unmatched = self.unmatched_attributes(last.attributes)
            if unmatched:
                return (
                    f"Expected error attributes to match {self._attributes}, "
                    f"but got these mismatches: {unmatched} "
                    f"and actual values are {last.attributes}"
                )

        expectation = self._expectation
        actual = last.error
        got = f"{type(actual).__name__} with message: '{message_of(actual)}'"
        if isinstance(expectation, ErrorKind):
            return (
                f"Expected error to be an instance of {expectation.kind.__name__}, "
                f"but got {got}"
            )
        if isinstance(expectation, ErrorInstance):
            return (
                f"Expected error to be {expectation.kind.__name__} with message "
                f"'{expectation.message}', but got {got}"
            )
        if isinstance(expectation, Pattern):
            return (
                f"Expected error message to match '{expectation.regex.pattern}', "
                f"but got: '{message_of(actual)}'"
            )
        if isinstance(expectation, NoExpectation):
            return (
                "Expected the block to report exactly one error, but "
                f"{_errors_reported(self._subscriber.count)}."
            )
        return f"Expected error to be {expectation.value!r}, but got: {actual!r}"

    def failure_message_when_negated(self) -> str:
        """Explain why the last negated match failed."""
        return (
            "Expected the block not to report any errors, but "
            f"{_errors_reported(self._subscriber.count)}."
        )

    def describe_to(self, description: Description) -> None:
        description.append_text("a block reporting ").append_text(
            _describe_expectation(self._expectation)
        )
        if self._attributes:
            description.append_text(f" with attributes {self._attributes}")

    def describe_mismatch(self, item: Block | None, mismatch_description: Description) -> None:
        mismatch_description.append_text(self.failure_message())


def _errors_reported(count: int) -> str:
    if count == 1:
        return "1 error has been reported"
    return f"{count} errors have been reported"


def _describe_expectation(expectation: Expectation) -> str:
    if isinstance(expectation, NoExpectation):
        return "exactly one error"
    if isinstance(expectation, ErrorKind):
        return f"an instance of {expectation.kind.__name__}"
    if isinstance(expectation, ErrorInstance):
        if not expectation.message:
            return f"an instance of {expectation.kind.__name__}"
        return f"{expectation.kind.__name__} with message '{expectation.message}'"
    if isinstance(expectation, Pattern):
        return f"an error with message matching '{expectation.regex.pattern}'"
    return f"the error {expectation.value!r}"


def have_reported_error(
    expected: object = None,
    *,
    reporter: ErrorReporterPort | None = None,
) -> HaveReportedError:
    """Passes if the block reported an error to the error reporter.

    Args:
        expected: None, an exception class, an exception instance,
            a compiled regex, or a tag.
        reporter: Reporter to observe. Defaults to get_reporter().

    Returns:
        A HaveReportedError matcher.
    """
    return HaveReportedError(expected, reporter=reporter)
