"""Block expectations for matchers that run a callable.

Example:
    ```python
    expect(lambda: charge(order)).to(have_reported_error(PaymentError))
    expect(lambda: noop()).not_to(have_reported_error())
    ```
"""

from collections.abc import Callable
from typing import Protocol


class BlockMatcher(Protocol):
    """Matcher that can be evaluated against a zero-argument callable."""

    def matches(self, item: Callable[[], object] | None) -> bool: ...

    def supports_block_expectations(self) -> bool: ...

    def failure_message(self) -> str: ...

    def failure_message_when_negated(self) -> str: ...


class BlockExpectation:
    """Wraps a block so it can be checked against a matcher."""

    def __init__(self, block: Callable[[], object] | None) -> None:
        self._block = block

    def to(self, matcher: BlockMatcher) -> None:
        """Assert the matcher passes for the block.

        Raises:
            AssertionError: With the matcher's failure message.
        """
        self._check_supported(matcher)
        if not matcher.matches(self._block):
            raise AssertionError(matcher.failure_message())

    def not_to(self, matcher: BlockMatcher) -> None:
        """Assert the matcher does not pass for the block.

        Raises:
            AssertionError: With the matcher's negated failure message.
        """
        self._check_supported(matcher)
        if matcher.matches(self._block):
            raise AssertionError(matcher.failure_message_when_negated())

    to_not = not_to

    @staticmethod
    def _check_supported(matcher: BlockMatcher) -> None:
        supports = getattr(matcher, "supports_block_expectations", None)
        if supports is None or not supports():
            raise TypeError(
                f"{type(matcher).__name__} does not support block expectations"
            )


def expect(block: Callable[[], object] | None) -> BlockExpectation:
    """Start a block expectation."""
    return BlockExpectation(block)
