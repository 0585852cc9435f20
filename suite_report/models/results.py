"""Result model of a single test-suite run."""

import re
from collections.abc import Sequence
from dataclasses import dataclass

from suite_report.models.posted import PostedResults
from suite_report.models.suite import SuiteDescriptor

COUNT_PATTERN = re.compile(r"[+-]?[0-9]+")


class InvalidCountError(ValueError):
    """Raised when a posted count is not a base-10 integer."""


def parse_count(name: str, value: str) -> int:
    """Parse a posted count field.

    Raises:
        InvalidCountError: If ``value`` is not a base-10 integer

    """
    if COUNT_PATTERN.fullmatch(value) is None:
        raise InvalidCountError(f"{name} is not a valid integer: {value!r}")
    return int(value)


@dataclass(frozen=True, kw_only=True)
class TestRunResults:
    """Results of a test-suite run as posted by the runner.

    Counts are kept as the posted strings. They are only interpreted when a
    derived value such as ``total_tests`` is requested.
    """

    __test__ = False

    result: str
    total_time: str
    num_test_passes: str
    num_test_failures: str
    num_command_passes: str
    num_command_failures: str
    num_command_errors: str
    suite: SuiteDescriptor
    test_tables: Sequence[str]

    @classmethod
    def from_posted(
        cls,
        result: str,
        total_time: str,
        num_test_passes: str,
        num_test_failures: str,
        num_command_passes: str,
        num_command_failures: str,
        num_command_errors: str,
        suite: str,
        test_tables: Sequence[str],
    ) -> "TestRunResults":
        """Build results from the posted fields, parsing the raw suite."""
        return cls(
            result=result,
            total_time=total_time,
            num_test_passes=num_test_passes,
            num_test_failures=num_test_failures,
            num_command_passes=num_command_passes,
            num_command_failures=num_command_failures,
            num_command_errors=num_command_errors,
            suite=SuiteDescriptor.parse(suite),
            test_tables=test_tables,
        )

    @classmethod
    def from_posted_results(cls, posted: PostedResults) -> "TestRunResults":
        return cls.from_posted(
            result=posted.result,
            total_time=posted.total_time,
            num_test_passes=posted.num_test_passes,
            num_test_failures=posted.num_test_failures,
            num_command_passes=posted.num_command_passes,
            num_command_failures=posted.num_command_failures,
            num_command_errors=posted.num_command_errors,
            suite=posted.suite,
            test_tables=posted.test_tables,
        )

    @property
    def total_tests(self) -> int:
        """Number of tests run, passed plus failed.

        Raises:
            InvalidCountError: If either test count is not an integer

        """
        return parse_count("numTestPasses", self.num_test_passes) + parse_count(
            "numTestFailures", self.num_test_failures
        )
