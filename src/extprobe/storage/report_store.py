"""File sink for the two report artifacts.

Writes the results JSON and the HTML report for one run. Uses atomic
writes (write to .tmp, then rename) so a reader never sees a partial
artifact. Any I/O failure surfaces as SinkError; there is no fallback.
"""

from __future__ import annotations

from contextlib import suppress
from datetime import datetime
from pathlib import Path

from extprobe.errors import SinkError
from extprobe.models.config import OutputConfig
from extprobe.models.outcome import RunReport
from extprobe.report.builder import dump_outcomes, load_outcomes
from extprobe.report.html import DEFAULT_TITLE, render_html


class ReportWriter:
    """Persist a RunReport as results JSON plus HTML report.

    File layout (defaults, relative to the project root):
        test-results/
            results.json     # Outcome array
        test-report.html     # Rendered report
    """

    def __init__(
        self, results_path: Path, report_path: Path, title: str = DEFAULT_TITLE
    ) -> None:
        self.results_path = results_path
        self.report_path = report_path
        self.title = title

    @classmethod
    def from_config(cls, project_root: Path, output: OutputConfig) -> ReportWriter:
        return cls(
            results_path=project_root / output.results_file,
            report_path=project_root / output.report_file,
            title=output.title,
        )

    def write(self, report: RunReport, generated_at: datetime) -> None:
        """Write both artifacts for the report.

        Raises:
            SinkError: If either file cannot be written.
        """
        self.write_results(report)
        self.write_html(report, generated_at)

    def write_results(self, report: RunReport) -> None:
        _atomic_write(self.results_path, dump_outcomes(report.outcomes))

    def write_html(self, report: RunReport, generated_at: datetime) -> None:
        _atomic_write(self.report_path, render_html(report, generated_at, self.title))

    def load_results(self) -> RunReport:
        """Load the stored results file back into a RunReport.

        Raises:
            FileNotFoundError: If no results file exists.
            pydantic.ValidationError: If the file is not a valid outcome list.
        """
        content = self.results_path.read_text(encoding="utf-8")
        return RunReport(outcomes=tuple(load_outcomes(content)))


def _atomic_write(path: Path, content: str) -> None:
    tmp_file = path.with_name(path.name + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_file.write_text(content, encoding="utf-8")
        tmp_file.replace(path)
    except OSError as exc:
        with suppress(OSError):
            tmp_file.unlink(missing_ok=True)
        raise SinkError(str(path), exc.strerror or str(exc)) from exc
