"""extprobe command line interface.

``extprobe run`` loads an unpacked tracker-blocking extension into
Chromium, runs the check battery once, and writes a JSON results file
and an HTML report. The remaining commands work without a browser:
``report`` re-renders the HTML from stored results, ``validate`` and
``stage`` handle the extension's files, and ``init`` writes a starter
extprobe.yaml.

Exit codes: 0 all checks passed, 1 a check failed, 2 configuration or
usage error, 3 a report artifact could not be written.
"""

import typer

from extprobe import __version__
from extprobe.cli.init_cmd import init
from extprobe.cli.report_cmd import report as report_cmd
from extprobe.cli.run_cmd import run
from extprobe.cli.stage_cmd import stage
from extprobe.cli.validate_cmd import validate

app = typer.Typer(
    name="extprobe",
    help=(
        "Load a tracker-blocking browser extension into Chromium, verify it "
        "with a fixed battery of checks, and write JSON and HTML reports for CI."
    ),
    epilog="Exit codes: 0 passed, 1 check failed, 2 config error, 3 report write error.",
    no_args_is_help=True,
)

# Browser-backed run first, then the offline helpers.
app.command(help="Run every check against the extension and write both reports.")(run)
app.command(name="report", help="Re-render the HTML report from a stored results file.")(
    report_cmd
)
app.command(help="Check the extension's required files and tracker list without a browser.")(
    validate
)
app.command(help="Copy the required extension files from a source tree.")(stage)
app.command(help="Write a default extprobe.yaml.")(init)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(f"extprobe {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show the extprobe version and exit.",
        callback=_print_version,
        is_eager=True,
    ),
) -> None:
    """Verify a tracker-blocking Chromium extension and report the results."""
