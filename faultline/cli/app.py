# faultline/cli/app.py
# Root Typer application & command registration
#
# ! Command imports at bottom of file are deferred to avoid circular dependencies.

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

# load environment variables once at startup
load_dotenv()

from ..config.settings import settings_manager
from ..core.output import reset_log
from ..fault_io.console import console
from .decorators import handle_faultline_error


app = typer.Typer(
    rich_markup_mode="rich",
    add_completion=False,
    no_args_is_help=False,
    help="Report uncaught errors from console applications through a message template.",
    context_settings={"help_option_names": ["--help", "-h"]},
)


# * Load settings & initialize logging before any subcommand runs
@app.callback(invoke_without_command=True)
@handle_faultline_error
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging for debugging"
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Write verbose logs to file (enables verbose mode)"
    ),
) -> None:
    # respect injected ctx.obj from tests/embedding; only load if absent
    if getattr(ctx, "obj", None) is None:
        ctx.obj = settings_manager.load()

    # must be after settings load to check dev_mode
    from ..core.verbose import init_verbose

    # log_file implies verbose mode
    verbose_enabled = verbose or log_file is not None
    dev_mode = ctx.obj.dev_mode if hasattr(ctx.obj, "dev_mode") else False
    init_verbose(enabled=verbose_enabled, log_file=log_file, dev_mode=dev_mode)
    # closes the log file (w/ its session-end line) however the command exits
    ctx.call_on_close(reset_log)

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        ctx.exit()


# ! import command modules here to avoid circular import w/ app object
from .commands import run as _run  # noqa: F401, E402
from .commands import template as _template  # noqa: F401, E402
from .commands import config as _config  # noqa: F401, E402
