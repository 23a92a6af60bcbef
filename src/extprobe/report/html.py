"""Rendered report artifact: a self-contained HTML page.

Rendering is a pure function of the RunReport and the generation
timestamp: the same inputs always produce the same bytes. Styling is
inlined and all values are HTML-escaped.
"""

from __future__ import annotations

from datetime import datetime

from jinja2 import Environment, PackageLoader, StrictUndefined, select_autoescape

from extprobe.models.outcome import RunReport

DEFAULT_TITLE = "Tracker Blocker Extension Test Report"
TEMPLATE_NAME = "report.html.j2"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S %Z"


def build_jinja_env() -> Environment:
    return Environment(
        loader=PackageLoader("extprobe.report", "templates"),
        autoescape=select_autoescape(enabled_extensions=("html", "j2")),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


_ENV = build_jinja_env()


def format_timestamp(generated_at: datetime) -> str:
    return generated_at.strftime(TIMESTAMP_FORMAT).rstrip()


def render_html(
    report: RunReport, generated_at: datetime, title: str = DEFAULT_TITLE
) -> str:
    """Render the HTML report.

    Args:
        report: The aggregated run.
        generated_at: Timestamp shown on the generation line.
        title: Page title and heading.

    Returns:
        The complete HTML document.
    """
    template = _ENV.get_template(TEMPLATE_NAME)
    return template.render(
        report=report,
        title=title,
        generated_on=format_timestamp(generated_at),
    )
