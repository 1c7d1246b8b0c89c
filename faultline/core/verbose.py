# faultline/core/verbose.py
# Verbose logging helpers for renders, listener dispatch & file I/O; all go through the registered log

from __future__ import annotations

from pathlib import Path

from .output import DiagnosticLog, OutputLevel, get_log, register_log


# * Build & register the CLI log for this run; debug output needs dev_mode as well
def init_verbose(
    enabled: bool = False,
    log_file: Path | None = None,
    dev_mode: bool = False,
) -> DiagnosticLog:
    from ..cli.diagnostics import ConsoleLog

    if not enabled:
        level = OutputLevel.NORMAL
    elif dev_mode:
        level = OutputLevel.DEBUG
    else:
        level = OutputLevel.VERBOSE

    log = ConsoleLog(level, log_file)
    register_log(log)
    return log


def vlog(category: str, message: str, detail: str | None = None) -> None:
    get_log().log(OutputLevel.VERBOSE, category, message, detail)


# * Log a rendered error chain, one detail line per class
def vlog_render(class_names: list[str], length: int) -> None:
    detail = "\n".join(f"- {name}" for name in class_names) or None
    vlog("RENDER", f"Rendered {len(class_names)} error(s) into {length:,} chars", detail)


def vlog_listeners(count: int, class_name: str) -> None:
    vlog("LISTEN", f"Notifying {count} listener(s) of {class_name}")


def vlog_file_read(path: Path, size: int | None = None) -> None:
    size_str = f" ({size:,} bytes)" if size is not None else ""
    vlog("FILE", f"Read: {path}{size_str}")


def vlog_file_write(path: Path, size: int | None = None) -> None:
    size_str = f" ({size:,} bytes)" if size is not None else ""
    vlog("FILE", f"Write: {path}{size_str}")
