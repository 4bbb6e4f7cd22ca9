"""Value matching used to compare expected attributes with reported ones.

Expected values may be literals, compiled regexes, classes, containers of
those, or any hamcrest matcher, so assertions can compose:

    have_reported_error().with_(user_id=greater_than(0), path=re.compile("^/api"))
"""

import re
from collections.abc import Mapping

from hamcrest.core.matcher import Matcher


class HamcrestValueMatcher:
    """Implementation of ValueMatcherPort backed by hamcrest matchers."""

    def values_match(self, expected: object, actual: object) -> bool:
        """Return True if actual satisfies expected.

        Args:
            expected: Literal, regex, class, mapping, list/tuple or hamcrest Matcher.
            actual: The value found in the reported attributes.

        Returns:
            True when actual matches expected, recursively for containers.
        """
        if isinstance(expected, Matcher):
            return expected.matches(actual)
        if isinstance(expected, re.Pattern):
            if isinstance(actual, str):
                return expected.search(actual) is not None
            return actual == expected
        if isinstance(expected, type):
            return actual == expected or isinstance(actual, expected)
        if isinstance(expected, Mapping):
            if not isinstance(actual, Mapping) or set(expected) != set(actual):
                return False
            return all(self.values_match(value, actual[key]) for key, value in expected.items())
        if isinstance(expected, (list, tuple)):
            if not isinstance(actual, (list, tuple)) or len(expected) != len(actual):
                return False
            return all(self.values_match(e, a) for e, a in zip(expected, actual))
        return actual == expected


_default = HamcrestValueMatcher()


def values_match(expected: object, actual: object) -> bool:
    """Compare with the default HamcrestValueMatcher."""
    return _default.values_match(expected, actual)
