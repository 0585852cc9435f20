"""CLI entry point for rendering test-suite reports."""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from suite_report.config import ReportConfig
from suite_report.loader import load_posted_results
from suite_report.models.results import InvalidCountError, TestRunResults
from suite_report.renderer import write_report


def log_results_summary(log: logging.Logger, results: TestRunResults) -> None:
    """Log a short summary of the run."""
    log.info("=" * 80)
    log.info("Test Suite Summary:")
    log.info("=" * 80)
    log.info("Result: %s (%s)", results.result, results.total_time)
    log.info(
        "Tests: %d total, %s passed, %s failed",
        results.total_tests,
        results.num_test_passes,
        results.num_test_failures,
    )
    log.info(
        "Commands: %s passed, %s failed, %s errors",
        results.num_command_passes,
        results.num_command_failures,
        results.num_command_errors,
    )


def run(input_path: Path, output_path: Path | None, config_json: str) -> int:
    """Render a report and return exit code."""
    log = logging.getLogger("suite_report")

    try:
        config = ReportConfig.model_validate_json(config_json)
        posted = load_posted_results(input_path, config.encoding)
        results = TestRunResults.from_posted_results(posted)
        log_results_summary(log, results)

        if output_path is None:
            write_report(results, sys.stdout)
        else:
            with output_path.open("w", encoding=config.output_encoding) as out:
                write_report(results, out)
            log.info("Report written to %s", output_path)
    except (
        OSError,
        LookupError,
        ValidationError,
        InvalidCountError,
    ) as e:
        log.error("Failed to render report: %s", e)
        return 2

    return 0 if results.result == "passed" else 1


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Render an HTML test-suite report")
    parser.add_argument(
        "--input",
        type=Path,
        required=True,
        help="Posted results, as a JSON file or a form-encoded body",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Path of the HTML report (default: stdout)",
    )
    parser.add_argument(
        "--config",
        default="{}",
        help="JSON configuration for decoding and output",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    exit_code = run(
        input_path=args.input,
        output_path=args.output,
        config_json=args.config,
    )
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
