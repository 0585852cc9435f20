"""HTML report rendering for test-suite results."""

import io
import logging
from typing import Protocol

from suite_report.models.results import TestRunResults

log = logging.getLogger(__name__)

HEADER = (
    "<html>\n"
    "<head><style type='text/css'>\n"
    "body, table {\n"
    "    font-family: Verdana, Arial, sans-serif;\n"
    "    font-size: 12;\n"
    "}\n"
    "\n"
    "table {\n"
    "    border-collapse: collapse;\n"
    "    border: 1px solid #ccc;\n"
    "}\n"
    "\n"
    "th, td {\n"
    "    padding-left: 0.3em;\n"
    "    padding-right: 0.3em;\n"
    "}\n"
    "\n"
    "a {\n"
    "    text-decoration: none;\n"
    "}\n"
    "\n"
    ".title {\n"
    "    font-style: italic;\n"
    "}\n"
    "\n"
    ".selected {\n"
    "    background-color: #ffffcc;\n"
    "}\n"
    "\n"
    ".status_done {\n"
    "    background-color: #eeffee;\n"
    "}\n"
    "\n"
    ".status_passed {\n"
    "    background-color: #ccffcc;\n"
    "}\n"
    "\n"
    ".status_failed {\n"
    "    background-color: #ffcccc;\n"
    "}\n"
    "\n"
    ".breakpoint {\n"
    "    background-color: #cccccc;\n"
    "    border: 1px solid black;\n"
    "}\n"
    "</style><title>Test suite results</title></head>\n"
    "<body>\n<h1>Test suite results </h1>"
)

SUMMARY_HTML = (
    "\n\n<table>\n<tr>\n<td>result:</td>\n<td>{0}</td>\n"
    "</tr>\n<tr>\n<td>totalTime:</td>\n<td>{1}</td>\n</tr>\n"
    "<tr>\n<td>numTestPasses:</td>\n<td>{2}</td>\n</tr>\n"
    "<tr>\n<td>numTestFailures:</td>\n<td>{3}</td>\n</tr>\n"
    "<tr>\n<td>numCommandPasses:</td>\n<td>{4}</td>\n</tr>\n"
    "<tr>\n<td>numCommandFailures:</td>\n<td>{5}</td>\n</tr>\n"
    "<tr>\n<td>numCommandErrors:</td>\n<td>{6}</td>\n</tr>\n"
    "<tr>\n<td>{7}</td>\n<td>&nbsp;</td>\n</tr>\n</table>"
)

SUITE_HTML = (
    '<tr>\n<td><a name="testresult{0}">{1}</a><br/>{2}</td>\n<td>&nbsp;</td>\n</tr>'
)

FOOTER = "</table></body></html>"


class ReportSink(Protocol):
    """Anything the report can be written to, such as an open text file."""

    def write(self, s: str, /) -> object: ...

    def flush(self) -> None: ...


def write_report(results: TestRunResults, sink: ReportSink) -> None:
    """Write the HTML report for ``results`` to ``sink``.

    Values are interpolated as-is; callers supply markup-safe content.

    Args:
        results: Results of the test-suite run
        sink: Text sink receiving the document

    Raises:
        IndexError: If there are more test tables than suite links
        OSError: If the sink rejects a write

    """
    log.info("Writing report for %d test table(s)", len(results.test_tables))

    sink.write(HEADER)
    sink.write(
        SUMMARY_HTML.format(
            results.result,
            results.total_time,
            results.num_test_passes,
            results.num_test_failures,
            results.num_command_passes,
            results.num_command_failures,
            results.num_command_errors,
            results.suite.updated_suite,
        )
    )
    for index, table in enumerate(results.test_tables):
        log.debug("Writing test result row %d", index)
        sink.write(SUITE_HTML.format(index, results.suite.href(index), table))
    sink.write(FOOTER)
    sink.flush()


def render_report(results: TestRunResults) -> str:
    """Render the HTML report for ``results`` into a string."""
    buffer = io.StringIO()
    write_report(results, buffer)
    return buffer.getvalue()
