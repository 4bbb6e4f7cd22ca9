"""BDD step definitions for have_reported_error features."""

from collections.abc import Callable
from dataclasses import dataclass, field

import pytest
from pytest_bdd import given, parsers, then, when

from reportcheck.adapters.reporter import InMemoryErrorReporter
from reportcheck.expect import expect
from reportcheck.matchers import have_reported_error
from tests.support import CustomError

_ERROR_CLASSES: dict[str, type[Exception]] = {
    "Exception": Exception,
    "ValueError": ValueError,
    "CustomError": CustomError,
}


@dataclass
class ReportingScenarioContext:
    """State shared between the steps of one scenario."""

    reporter: InMemoryErrorReporter | None = None
    block: Callable[[], None] = field(default=lambda: None)
    failure: AssertionError | None = None


@pytest.fixture
def ctx() -> ReportingScenarioContext:
    """Fresh scenario context for each test."""
    return ReportingScenarioContext()


def _run(ctx: ReportingScenarioContext, assertion: Callable[[], None]) -> None:
    try:
        assertion()
    except AssertionError as exc:
        ctx.failure = exc


@given("a fresh default error reporter")
def step_default_reporter(
    ctx: ReportingScenarioContext, error_reporter: InMemoryErrorReporter
) -> None:
    ctx.reporter = error_reporter


@given(parsers.parse('a block that reports {kind} "{message}" with user_id {user_id:d}'))
def step_block_reports_error(
    ctx: ReportingScenarioContext, kind: str, message: str, user_id: int
) -> None:
    reporter = ctx.reporter
    assert reporter is not None

    def block() -> None:
        reporter.report(_ERROR_CLASSES[kind](message), user_id=user_id)

    ctx.block = block


@given(parsers.parse("a block that reports {count:d} error(s)"))
def step_block_reports_count(ctx: ReportingScenarioContext, count: int) -> None:
    reporter = ctx.reporter
    assert reporter is not None

    def block() -> None:
        for i in range(count):
            reporter.report(ValueError(f"error {i}"))

    ctx.block = block


@when(parsers.parse("I expect the block to have reported {kind} with user_id {user_id:d}"))
def step_expect_reported(ctx: ReportingScenarioContext, kind: str, user_id: int) -> None:
    matcher = have_reported_error(_ERROR_CLASSES[kind]).with_(user_id=user_id)
    _run(ctx, lambda: expect(ctx.block).to(matcher))


@when("I expect the block not to have reported an error")
def step_expect_not_reported(ctx: ReportingScenarioContext) -> None:
    _run(ctx, lambda: expect(ctx.block).not_to(have_reported_error()))


@then("the expectation passes")
def step_passes(ctx: ReportingScenarioContext) -> None:
    assert ctx.failure is None


@then(parsers.parse('the expectation fails with a message containing "{text}"'))
def step_fails_with(ctx: ReportingScenarioContext, text: str) -> None:
    assert ctx.failure is not None
    assert text in str(ctx.failure)


@then(parsers.parse('the failure message contains "{text}"'))
def step_failure_contains(ctx: ReportingScenarioContext, text: str) -> None:
    assert ctx.failure is not None
    assert text in str(ctx.failure)
