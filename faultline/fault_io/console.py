# faultline/fault_io/console.py
# Centralized console management & output sinks for error reports

# This module provides the shared Console instances that all other modules import to ensure consistent output.
#
# Architecture notes:
# - `console` writes to stdout (command output); `err_console` writes to stderr (error reports)
# - The _ConsoleProxy pattern allows reconfiguring/resetting without breaking module-level references
# - ErrorReporter depends only on the OutputSink protocol; ConsoleSink is the default implementation
#
# Usage patterns:
# - For command output: use `console.print()`
# - For error reports: inject a sink into ErrorReporter or rely on the default ConsoleSink
# - Tests: Use reset_console() for isolation; pass a ConsoleSink over a recording Console to capture reports

from __future__ import annotations
from typing import Optional, Any, Protocol, runtime_checkable
from rich.console import Console

DEFAULT_ERROR_STYLE = "bold white on red"


# proxy delegating to underlying Console instance; allows reconfiguring/resetting console w/out breaking module-level references; all Console methods forwarded via __getattr__
class _ConsoleProxy:
    __slots__ = ("_console", "_stderr")

    def __init__(self, stderr: bool = False) -> None:
        self._stderr = stderr
        self._console = Console(stderr=stderr)

    def __getattr__(self, name: str) -> Any:
        return getattr(self._console, name)

    def _set_console(self, new_console: Console) -> None:
        self._console = new_console

    def _get_console(self) -> Console:
        return self._console

    def _reset(self) -> Console:
        self._console = Console(stderr=self._stderr)
        return self._console


console = _ConsoleProxy()
err_console = _ConsoleProxy(stderr=True)


# * Anything an ErrorReporter can write a rendered report to
@runtime_checkable
class OutputSink(Protocol):
    def write(self, text: str) -> None: ...


# * Sink printing reports verbatim through a Rich console (stderr by default)
class ConsoleSink:
    def __init__(self, target: Any = None, style: str = DEFAULT_ERROR_STYLE) -> None:
        self._target = target
        self.style = style

    @property
    def target(self) -> Any:
        return self._target if self._target is not None else err_console

    def write(self, text: str) -> None:
        # report text carries tracebacks & brackets; never interpret it as markup
        self.target.print(
            text,
            style=self.style,
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )


# * Get the underlying Console instance
def get_console(stderr: bool = False) -> Console:
    proxy = err_console if stderr else console
    # handle both proxy & direct Console (e.g., when patched in tests)
    if hasattr(proxy, "_get_console"):
        return proxy._get_console()
    return proxy  # type: ignore[return-value]


# * Configure stdout console w/ specific settings (useful for tests & CLI modes)
def configure_console(
    width: Optional[int] = None,
    force_terminal: Optional[bool] = None,
    record: bool = False,
) -> Console:
    kwargs: dict[str, Any] = {}
    if width is not None:
        kwargs["width"] = width
    if force_terminal is not None:
        kwargs["force_terminal"] = force_terminal
    if record:
        kwargs["record"] = True

    if kwargs:  # only recreate if settings provided
        console._set_console(Console(**kwargs))
    return console._get_console()


# * Reset both consoles to default configuration (useful for tests)
def reset_console() -> Console:
    err_console._reset()
    return console._reset()


__all__ = [
    "console",
    "err_console",
    "OutputSink",
    "ConsoleSink",
    "DEFAULT_ERROR_STYLE",
    "get_console",
    "configure_console",
    "reset_console",
]
