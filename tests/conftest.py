"""Shared test fixtures for all test modules."""

from collections.abc import Callable

import pytest

from reportcheck.adapters.reporter import InMemoryErrorReporter

pytest_plugins = ["reportcheck.adapters.pytest_plugin"]


@pytest.fixture
def reporter() -> InMemoryErrorReporter:
    """Provide an isolated reporter that is not installed as default."""
    return InMemoryErrorReporter()


@pytest.fixture
def reporting_block(
    error_reporter: InMemoryErrorReporter,
) -> Callable[..., Callable[[], None]]:
    """Factory fixture for blocks that report to the default reporter.

    Each positional argument is reported once, in order, with the
    given keyword attributes.

    Usage:
        def test_something(reporting_block):
            block = reporting_block(ValueError("boom"), user_id=42)
            expect(block).to(have_reported_error(ValueError))
    """

    def _block(*errors: object, **attributes: object) -> Callable[[], None]:
        def block() -> None:
            for error in errors:
                error_reporter.report(error, **attributes)

        return block

    return _block
