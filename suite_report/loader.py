"""Loading of posted test-suite results."""

import logging
import re
from pathlib import Path
from typing import Any

from suite_report.decoding import decode_all
from suite_report.models.posted import PostedResults

log = logging.getLogger(__name__)

TEST_TABLE_PATTERN = re.compile(r"testTable\.(\d+)")


def parse_posted_form(body: str, encoding: str | None = None) -> PostedResults:
    """Parse a form-encoded results body as posted by the test runner.

    Test tables are posted as ``testTable.1``, ``testTable.2``, ... and are
    collected in numeric order. Fields the report does not use are ignored.

    Args:
        body: The ``application/x-www-form-urlencoded`` request body
        encoding: Charset of the escaped values, host default when None

    Returns:
        The posted results

    Raises:
        pydantic.ValidationError: If a required field is missing

    """
    names: list[str] = []
    values: list[str] = []
    for pair in body.strip().split("&"):
        if not pair:
            continue
        name, _, value = pair.partition("=")
        names.append(name)
        values.append(value)

    fields: dict[str, Any] = {}
    test_tables: dict[int, str] = {}
    for name, value in zip(
        decode_all(names, encoding), decode_all(values, encoding), strict=True
    ):
        if match := TEST_TABLE_PATTERN.fullmatch(name):
            test_tables[int(match.group(1))] = value
        else:
            fields[name] = value

    log.info("Parsed posted results with %d test table(s)", len(test_tables))
    fields["testTables"] = [test_tables[key] for key in sorted(test_tables)]
    return PostedResults.model_validate(fields)


def load_posted_results(path: Path, encoding: str | None = None) -> PostedResults:
    """Load posted results from a file.

    ``.json`` files hold the fields as a JSON object; any other file is read
    as a form-encoded body.

    Raises:
        FileNotFoundError: If ``path`` does not exist
        pydantic.ValidationError: If the content is not valid results

    """
    log.info("Loading results from %s", path)
    content = path.read_text()
    if path.suffix == ".json":
        return PostedResults.model_validate_json(content)
    return parse_posted_form(content, encoding)
