#!/usr/bin/env python3
"""
Show the sections the parser locates in a plain-text CV.

Useful when a field comes back empty: it shows whether the section header was
found and where the section was cut off.

Usage:
    python show_sections.py cv.txt
    python show_sections.py cv.txt --log-dir outs/logs/debug
"""

import os
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from sieve.contexts.intake import locate_sections, prepare_text
from sieve.contexts.intake.logger import log_section_hits, setup_intake_logger
from sieve.utils.report_formatter import TableFormatter

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    help="Print every located section of a plain-text CV",
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
    log_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--log-dir",
            help="Directory for the session log (defaults to LOGS_PATH/sections_<timestamp>)",
            file_okay=False,
            resolve_path=True,
        ),
    ] = None,
):
    """Print the body of each standard section, or "(not found)"."""
    if log_dir is None:
        log_dir = LOGS_PATH / f"sections_{datetime.now():%Y%m%d_%H%M%S}"
    setup_intake_logger(log_dir)

    text = prepare_text(cv_file.read_text(encoding="utf-8", errors="replace"))
    sections = locate_sections(text)
    log_section_hits(sections)

    out = TableFormatter([])
    for name, body in sections.items():
        out.add_section_header(name.upper())
        out.add_text(body.strip("\n") if body.strip() else "(not found)")
        out.add_blank_line()

    typer.echo(out.render())


if __name__ == "__main__":
    app()
