# faultline/core/reporter.py
# ErrorReporter: renders uncaught errors through a placeholder template, notifies listeners & returns an exit code

from __future__ import annotations

import sys
from types import TracebackType
from typing import TYPE_CHECKING, Any, Callable, Optional

from .debug import debug_print
from .error_chain import DEFAULT_MAX_DEPTH, describe, walk_chain
from .template import DEFAULT_TEMPLATE, MessageTemplate
from .verbose import vlog_listeners, vlog_render

if TYPE_CHECKING:
    from ..fault_io.console import OutputSink

Listener = Callable[[Any], Any]

DEFAULT_EXIT_CODE = 1


class ErrorReporter:
    # Owns the message template & listener set for one console application.
    # Rendering never raises for template content; unknown placeholders stay literal.
    # Only malformed chains (cycles, runaway depth) raise ErrorChainError.

    def __init__(
        self,
        sink: Optional[OutputSink] = None,
        template: str = DEFAULT_TEMPLATE,
        exit_code: int = DEFAULT_EXIT_CODE,
        max_chain_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        if exit_code == 0:
            raise ValueError("exit_code must be non-zero")
        self._sink = sink
        self._template = MessageTemplate(template)
        self._listeners: list[Listener] = []
        self.exit_code = exit_code
        self.max_chain_depth = max_chain_depth
        self.last_exit_code: int | None = None
        self._previous_hook: Optional[Callable[..., Any]] = None

    # * Active template text
    @property
    def template(self) -> str:
        return self._template.text

    # * Replace the template unconditionally (no placeholder validation)
    def set_template(self, text: str) -> None:
        self._template = MessageTemplate(text)

    @property
    def listeners(self) -> tuple[Listener, ...]:
        return tuple(self._listeners)

    # * Add listener unless the same object is already attached
    def attach_listener(self, listener: Listener) -> None:
        if any(existing is listener for existing in self._listeners):
            return
        self._listeners.append(listener)

    @property
    def sink(self) -> OutputSink:
        if self._sink is None:
            # ! lazy import keeps core free of console I/O until first write
            from ..fault_io.console import ConsoleSink

            self._sink = ConsoleSink()
        return self._sink

    # * Render the error & its causal chain, outermost block first
    def render(self, error: Any) -> str:
        records = [describe(e) for e in walk_chain(error, self.max_chain_depth)]

        # fold from innermost so each block embeds the one it was caused by
        message = ""
        for record in reversed(records):
            message = self._template.render(record, previous=message)

        vlog_render([r.class_name for r in records], len(message))
        return message

    create_message = render

    # * Write the report, notify listeners in attachment order & return the exit code
    def invoke(self, error: Any) -> int:
        message = self.render(error)
        self.sink.write(message)

        vlog_listeners(len(self._listeners), type(error).__name__)
        for listener in list(self._listeners):
            debug_print(f"Calling listener {_listener_name(listener)}", "LISTEN")
            listener(error)

        self.last_exit_code = self.exit_code
        return self.exit_code

    __call__ = invoke

    # * Register as sys.excepthook; the interpreter still picks the process exit status
    def install(self) -> None:
        if self._previous_hook is None:
            self._previous_hook = sys.excepthook
        sys.excepthook = self._excepthook

    # * Restore whichever hook was active before install()
    def uninstall(self) -> None:
        if self._previous_hook is not None:
            sys.excepthook = self._previous_hook
            self._previous_hook = None

    def _excepthook(
        self,
        exc_type: type[BaseException],
        exc: BaseException,
        tb: Optional[TracebackType],
    ) -> None:
        if exc.__traceback__ is None and tb is not None:
            exc = exc.with_traceback(tb)
        self.invoke(exc)


def _listener_name(listener: Listener) -> str:
    return getattr(listener, "__qualname__", None) or repr(listener)
