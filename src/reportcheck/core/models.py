"""Core domain models for error report matching."""

import enum
import re
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ReportEvent:
    """A single error report captured from the error reporter.

    Attributes:
        error: The reported error value (usually an exception instance).
        attributes: Contextual attributes passed along with the report.
    """

    error: object
    attributes: dict[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", dict(self.attributes))


@dataclass(frozen=True)
class NoExpectation:
    """Matches when exactly one error was reported."""


@dataclass(frozen=True)
class ErrorKind:
    """Matches when the last reported error is an instance of kind."""

    kind: type


@dataclass(frozen=True)
class ErrorInstance:
    """Matches class and, when message is non-empty, the exact message."""

    kind: type
    message: str


@dataclass(frozen=True)
class Pattern:
    """Matches when the last reported error's message matches regex."""

    regex: re.Pattern[str]


@dataclass(frozen=True)
class Tag:
    """Matches when the last reported error equals value."""

    value: object


Expectation = NoExpectation | ErrorKind | ErrorInstance | Pattern | Tag


def message_of(error: object) -> str:
    """Return the message of a reported error.

    Exceptions built from a single string use that string directly, since
    str() quotes the argument for some classes (KeyError). Exceptions
    without arguments have an empty message.
    """
    if isinstance(error, BaseException):
        if not error.args:
            return ""
        if len(error.args) == 1 and isinstance(error.args[0], str):
            return error.args[0]
    return str(error)


def expectation_from(value: object) -> Expectation:
    """Resolve a user supplied expected value into an Expectation.

    Args:
        value: None, an exception class, an exception instance,
               a compiled regex, or a tag (str or Enum member).

    Returns:
        The Expectation variant for the runtime shape of value.

    Raises:
        TypeError: If value has none of the supported shapes.
    """
    if value is None:
        return NoExpectation()
    if isinstance(value, type):
        return ErrorKind(value)
    if isinstance(value, BaseException):
        return ErrorInstance(type(value), message_of(value))
    if isinstance(value, re.Pattern):
        return Pattern(value)
    if isinstance(value, (str, enum.Enum)):
        return Tag(value)
    raise TypeError(
        "expected error must be None, an exception class, an exception "
        f"instance, a compiled regex or a tag, got {type(value).__name__}"
    )
