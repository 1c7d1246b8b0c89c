# faultline/cli/commands/run.py
# Run a Python script as __main__ w/ uncaught errors reported through the configured template

from __future__ import annotations

import runpy
import sys
from pathlib import Path
from typing import Optional

import typer

from ...config.settings import get_settings
from ...core.verbose import vlog
from ..app import app
from ..decorators import handle_faultline_error, report_errors
from ..helpers import build_reporter


# * Execute script w/ its own argv & directory on sys.path, restoring both afterwards
def execute_script(script: Path, argv: list[str]) -> None:
    saved_argv = sys.argv[:]
    saved_path = sys.path[:]
    sys.argv = [str(script), *argv]
    sys.path.insert(0, str(script.resolve().parent))
    try:
        runpy.run_path(str(script), run_name="__main__")
    finally:
        sys.argv = saved_argv
        sys.path[:] = saved_path


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
@handle_faultline_error
def run(
    ctx: typer.Context,
    script: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True, help="Python script to run"
    ),
    template: Optional[str] = typer.Option(
        None, "--template", "-t", help="Message template overriding the configured one"
    ),
) -> None:
    """Run SCRIPT, reporting any uncaught exception & exiting w/ the configured code.

    Arguments after SCRIPT are passed to the script; use `--` before
    arguments that look like faultline options.
    """
    settings = get_settings(ctx)
    reporter = build_reporter(settings, template=template)

    vlog("RUN", f"Running {script}", " ".join(ctx.args) or None)
    report_errors(reporter)(execute_script)(script, list(ctx.args))
    vlog("RUN", f"{script} finished w/o uncaught errors")
