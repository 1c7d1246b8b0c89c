# faultline/cli/commands/template.py
# Template subcommands (show/preview/load/reset) for inspecting & changing the report template

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from ...config.settings import get_settings, settings_manager
from ...core.exceptions import FileReadError
from ...core.template import PLACEHOLDERS, MessageTemplate
from ...core.verbose import vlog_file_read
from ...fault_io.console import ConsoleSink, console
from ..app import app
from ..decorators import handle_faultline_error
from ..helpers import build_reporter, sample_error_chain

# * Sub-app for template commands; registered on root app
template_app = typer.Typer(rich_markup_mode="rich", help="Inspect & change the report template")
app.add_typer(template_app, name="template")


# * Print the active template verbatim & list the placeholders it uses
@template_app.command()
def show(ctx: typer.Context) -> None:
    settings = get_settings(ctx)
    text = settings.resolved_template
    source = "built-in default" if settings.template is None else "configured"

    console.print(f"[dim]Template ({source}):[/]")
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)

    used = MessageTemplate(text).placeholders
    names = ", ".join(f":{name}" for name in PLACEHOLDERS if name in used)
    console.print(
        f"[dim]Placeholders:[/] {names or 'none'}", highlight=False, emoji=False, soft_wrap=True
    )


# * Render a sample three-link error chain w/ the active (or given) template
@template_app.command()
@handle_faultline_error
def preview(
    ctx: typer.Context,
    template: Optional[str] = typer.Option(
        None, "--template", "-t", help="Template to preview instead of the configured one"
    ),
) -> None:
    settings = get_settings(ctx)
    reporter = build_reporter(
        settings, template=template, sink=ConsoleSink(console, style=settings.style)
    )
    reporter.sink.write(reporter.render(sample_error_chain()))


# * Store the contents of a file as the configured template
@template_app.command()
@handle_faultline_error
def load(
    path: Path = typer.Argument(..., help="Text file containing the template"),
) -> None:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise FileReadError(f"Could not read template {path}: {e}", path) from e
    vlog_file_read(path, len(text))

    settings_manager.set("template", text)
    console.print(f"[green]✓[/] Template loaded from [cyan]{escape(str(path))}[/]")


# * Drop the configured template & fall back to the built-in default
@template_app.command()
def reset() -> None:
    settings_manager.set("template", None)
    console.print("[green]✓[/] Template reset to built-in default")
