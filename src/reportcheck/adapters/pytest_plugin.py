"""pytest fixtures for asserting on reported errors.

Enable in a conftest.py:

    pytest_plugins = ["reportcheck.adapters.pytest_plugin"]
"""

from collections.abc import Generator

import pytest

from reportcheck.adapters.reporter import InMemoryErrorReporter, set_reporter


@pytest.fixture
def error_reporter() -> Generator[InMemoryErrorReporter]:
    """Install a fresh InMemoryErrorReporter as the default for one test.

    The previous default reporter is restored afterwards, so subscribers
    never leak from one test into the next.
    """
    reporter = InMemoryErrorReporter()
    previous = set_reporter(reporter)
    yield reporter
    reporter.clear()
    set_reporter(previous)
