#!/usr/bin/env python3
"""
CV Analysis CLI

Parses a plain-text CV and scores it, either against a job description
(keyword match) or on its own (ATS score). Prints a text report, or the JSON
result the web layer returns.

Usage:
    # ATS score and general suggestions
    python analyze_cv.py cv.txt

    # Keyword match against a job description
    python analyze_cv.py cv.txt --job-description role.txt

    # JSON output (logs go to stderr and the log file)
    python analyze_cv.py cv.txt -j role.txt --json
"""

import json
import os
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from sieve.contexts.intake import OversizeInputError
from sieve.contexts.scoring import analyze_cv
from sieve.contexts.scoring.logger import setup_scoring_logger
from sieve.contexts.scoring.report import format_analysis_report
from sieve.utils.settings import SettingsError, load_settings

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    help="Analyze a plain-text CV, optionally against a job description",
    add_completion=False,
)


@app.command()
def main(
    cv_file: Annotated[
        Path,
        typer.Argument(
            help="Plain-text CV file",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    job_description: Annotated[
        Optional[Path],
        typer.Option(
            "--job-description",
            "-j",
            help="Plain-text job description to match against",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the JSON analysis result instead of a report"),
    ] = False,
    config: Annotated[
        Optional[Path],
        typer.Option(
            "--config",
            "-c",
            help="YAML settings file (defaults to SIEVE_CONFIG_PATH, then built-in limits)",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Refuse oversize CV text instead of truncating it"),
    ] = False,
    log_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--log-dir",
            help="Directory for the session log (defaults to LOGS_PATH/analyze_<timestamp>)",
            file_okay=False,
            resolve_path=True,
        ),
    ] = None,
):
    """
    Analyze a plain-text CV.

    Examples:

        # Text report with ATS score
        python analyze_cv.py cv.txt

        # JSON result matched against a job description
        python analyze_cv.py cv.txt --job-description role.txt --json
    """
    mode = "match" if job_description else "ats"
    if log_dir is None:
        log_dir = LOGS_PATH / f"analyze_{datetime.now():%Y%m%d_%H%M%S}"
    setup_scoring_logger(log_dir, mode=mode)

    try:
        settings = load_settings(config)
    except SettingsError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    cv_text = cv_file.read_text(encoding="utf-8", errors="replace")
    jd_text = ""
    if job_description:
        jd_text = job_description.read_text(encoding="utf-8", errors="replace")

    try:
        report = analyze_cv(cv_text, jd_text, settings=settings, strict_size=strict)
    except OversizeInputError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
    else:
        typer.echo(format_analysis_report(report))


if __name__ == "__main__":
    app()
