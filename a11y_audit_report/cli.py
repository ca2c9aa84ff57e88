"""Typer CLI for building an HTML accessibility report from scan artifacts."""
import logging
from typing import Optional

import typer
from dotenv import load_dotenv

from .config import load_config
from .report import build_report, write_report

# loading variables from .env file
load_dotenv()

app = typer.Typer(add_completion=False)


@app.command()
def build(
    axe: Optional[str] = typer.Option(None, "--axe", envvar="A11Y_REPORT_AXE", help="Raw axe-core CLI text log."),
    lighthouse_json: Optional[str] = typer.Option(
        None, "--lighthouse-json", envvar="A11Y_REPORT_LIGHTHOUSE_JSON", help="Lighthouse JSON report."
    ),
    manual: Optional[str] = typer.Option(
        None, "--manual", envvar="A11Y_REPORT_MANUAL", help="Inline JSON array of manual findings."
    ),
    manual_file: Optional[str] = typer.Option(
        None, "--manual-file", envvar="A11Y_REPORT_MANUAL_FILE", help="JSON file of manual findings (overrides --manual)."
    ),
    screen_reader: Optional[str] = typer.Option(
        None, "--screen-reader", envvar="A11Y_REPORT_SCREEN_READER", help="Plain-text accessibility tree dump."
    ),
    output: Optional[str] = typer.Option(None, "--output", envvar="A11Y_REPORT_OUTPUT", help="Destination HTML file."),
    phase: Optional[str] = typer.Option(
        None, "--phase", envvar="A11Y_REPORT_PHASE", help="pre or post; selects the report title. [default: pre]"
    ),
    config: Optional[str] = typer.Option(None, "--config", help="YAML file with defaults for the options above."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
):
    """Render axe-core, Lighthouse and manual findings into one self-contained HTML report."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )
    settings = load_config(config)
    output = output or settings.output
    if not output:
        typer.echo("Error: --output is required", err=True)
        raise typer.Exit(code=1)

    # --manual and --manual-file are one setting: either on the command line
    # replaces both config keys
    if not (manual or manual_file):
        manual, manual_file = settings.manual, settings.manual_file

    report = build_report(
        axe=axe or settings.axe,
        lighthouse_json=lighthouse_json or settings.lighthouse_json,
        manual=manual,
        manual_file=manual_file,
        screen_reader=screen_reader or settings.screen_reader,
        phase=phase or settings.phase or "pre",
    )
    out_path = write_report(report, output)
    typer.echo(f"Report saved to {out_path}")


def main():  # pragma: no cover
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
