"""Parsed form of the suite table posted by the test runner."""

import re
from collections.abc import Sequence
from dataclasses import dataclass

ATTRIBUTES = r"""(?:[^>"']|"[^"]*"|'[^']*')*"""

# Labels never extend into a following anchor.
LINK_PATTERN = re.compile(
    rf"<a\s{ATTRIBUTES}?\bhref\s*=\s*(?P<quote>[\"'])(?P<target>.*?)(?P=quote)"
    rf"{ATTRIBUTES}>(?P<label>(?:(?!<a\s).)*?)</a\s*>",
    re.IGNORECASE | re.DOTALL,
)

ANCHOR_PREFIX = "testresult"


@dataclass(frozen=True, kw_only=True)
class SuiteLink:
    """A single test link found in the suite table."""

    target: str
    label: str


@dataclass(frozen=True, kw_only=True)
class SuiteDescriptor:
    """Suite table with one link per test row.

    The updated suite is the raw suite with every test link pointing at the
    matching ``testresult<i>`` anchor of the report instead of the test page.
    """

    raw_suite: str
    links: Sequence[SuiteLink]
    updated_suite: str

    @classmethod
    def parse(cls, raw_suite: str) -> "SuiteDescriptor":
        """Parse the raw suite markup into links and the updated suite."""
        links: list[SuiteLink] = []
        parts: list[str] = []
        position = 0

        for index, match in enumerate(LINK_PATTERN.finditer(raw_suite)):
            links.append(
                SuiteLink(target=match.group("target"), label=match.group("label"))
            )
            parts.append(raw_suite[position : match.start("target")])
            parts.append(f"#{ANCHOR_PREFIX}{index}")
            position = match.end("target")

        parts.append(raw_suite[position:])
        return cls(raw_suite=raw_suite, links=tuple(links), updated_suite="".join(parts))

    def href(self, index: int) -> str:
        """Return the display label of the test link at ``index``.

        Raises:
            IndexError: If the suite has no link at ``index``

        """
        if not 0 <= index < len(self.links):
            raise IndexError(
                f"Suite contains {len(self.links)} link(s) but link {index} was requested"
            )
        return self.links[index].label

    def __len__(self) -> int:
        return len(self.links)
