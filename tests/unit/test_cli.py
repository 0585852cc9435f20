"""Tests for CLI module."""

import logging
import sys
from pathlib import Path

import pytest

from suite_report.cli import log_results_summary, main, run
from suite_report.models.results import TestRunResults
from suite_report.testing.factories import PostedResultsFactory


def write_results(path: Path, **overrides: str) -> Path:
    """Write posted results as JSON."""
    posted = PostedResultsFactory.build(**overrides)
    path.write_text(posted.model_dump_json())
    return path


def test_log_results_summary(caplog: pytest.LogCaptureFixture) -> None:
    """Logs result, test and command counts."""
    results = TestRunResults.from_posted_results(
        PostedResultsFactory.build(
            num_test_passes="3", num_test_failures="1", num_command_passes="20"
        )
    )

    with caplog.at_level(logging.INFO):
        log_results_summary(logging.getLogger(), results)

    assert "Test Suite Summary:" in caplog.text
    assert "Result: passed (1.23)" in caplog.text
    assert "Tests: 4 total, 3 passed, 1 failed" in caplog.text
    assert "Commands: 20 passed, 0 failed, 0 errors" in caplog.text


class TestRun:
    """Tests for run function."""

    def test_writes_report_file(self, tmp_path: Path) -> None:
        """Writes the report and returns 0 for a passed run."""
        input_path = write_results(tmp_path / "results.json")
        output_path = tmp_path / "report.html"

        exit_code = run(input_path, output_path, "{}")

        assert exit_code == 0
        document = output_path.read_text(encoding="utf-8")
        assert document.startswith("<html>")
        assert '<a name="testresult1">Test2</a><br/><table>B</table>' in document
        assert document.endswith("</table></body></html>")

    def test_returns_one_for_failed_run(self, tmp_path: Path) -> None:
        """Returns 1 when the overall result is not passed."""
        input_path = write_results(
            tmp_path / "results.json", result="failed", num_test_failures="1"
        )

        exit_code = run(input_path, tmp_path / "report.html", "{}")

        assert exit_code == 1
        assert "<td>failed</td>" in (tmp_path / "report.html").read_text()

    def test_writes_to_stdout(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Writes the report to stdout when no output path is given."""
        input_path = write_results(tmp_path / "results.json")

        exit_code = run(input_path, None, "{}")

        assert exit_code == 0
        captured = capsys.readouterr()
        assert captured.out.startswith("<html>")
        assert '<a name="testresult0">Test1</a>' in captured.out

    def test_uses_configured_encoding(self, tmp_path: Path) -> None:
        """Decodes form bodies with the configured encoding."""
        input_path = tmp_path / "results.txt"
        input_path.write_text(
            "result=passed&totalTime=1%E9&numTestPasses=0&numTestFailures=0"
            "&numCommandPasses=0&numCommandFailures=0&numCommandErrors=0&suite="
        )
        output_path = tmp_path / "report.html"

        exit_code = run(input_path, output_path, '{"encoding": "latin-1"}')

        assert exit_code == 0
        assert "<td>1é</td>" in output_path.read_text(encoding="utf-8")

    def test_missing_input_returns_two(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Logs the error and returns 2 when the input is missing."""
        with caplog.at_level(logging.ERROR):
            exit_code = run(tmp_path / "missing.json", None, "{}")

        assert exit_code == 2
        assert "Failed to render report" in caplog.text

    def test_invalid_count_returns_two(self, tmp_path: Path) -> None:
        """Returns 2 when a test count is not an integer."""
        input_path = write_results(tmp_path / "results.json", num_test_passes="many")

        assert run(input_path, tmp_path / "report.html", "{}") == 2

    def test_mismatched_suite_returns_two(self, tmp_path: Path) -> None:
        """Returns 2 when there are more test tables than suite links."""
        input_path = tmp_path / "results.json"
        input_path.write_text(
            PostedResultsFactory.build(
                test_tables=["A", "B", "C"]
            ).model_dump_json()
        )

        assert run(input_path, tmp_path / "report.html", "{}") == 2

    def test_invalid_config_returns_two(self, tmp_path: Path) -> None:
        """Returns 2 when the configuration is not valid."""
        input_path = write_results(tmp_path / "results.json")

        assert run(input_path, None, '{"output_encoding": 5}') == 2


def test_main_exits_with_run_code(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Parses arguments and exits with the run's exit code."""
    input_path = write_results(tmp_path / "results.json")
    output_path = tmp_path / "report.html"
    monkeypatch.setattr(
        sys,
        "argv",
        ["suite-report", "--input", str(input_path), "--output", str(output_path)],
    )

    with pytest.raises(SystemExit) as exc_info:
        main()

    assert exc_info.value.code == 0
    assert output_path.exists()


def test_non_text_encoding_leaves_form_values_raw(tmp_path: Path) -> None:
    """Renders undecoded values when configured with a non-text codec."""
    input_path = tmp_path / "results.txt"
    input_path.write_text(
        "result=passed&totalTime=1%2B2&numTestPasses=0&numTestFailures=0"
        "&numCommandPasses=0&numCommandFailures=0&numCommandErrors=0&suite="
    )
    output_path = tmp_path / "report.html"

    exit_code = run(input_path, output_path, '{"encoding": "base64"}')

    assert exit_code == 0
    assert "<td>1%2B2</td>" in output_path.read_text(encoding="utf-8")
