# faultline/cli/helpers.py
# Shared CLI helpers for building reporters from settings & sample error chains

from __future__ import annotations

from typing import Optional

from ..config.settings import FaultlineSettings
from ..core.debug import debug_error
from ..core.reporter import ErrorReporter
from ..fault_io.console import ConsoleSink, OutputSink


# * Build a reporter from settings; CLI overrides win over persisted values
def build_reporter(
    settings: FaultlineSettings,
    template: Optional[str] = None,
    sink: Optional[OutputSink] = None,
) -> ErrorReporter:
    reporter = ErrorReporter(
        sink=sink or ConsoleSink(style=settings.style),
        template=template if template is not None else settings.resolved_template,
        exit_code=settings.exit_code,
        max_chain_depth=settings.max_chain_depth,
    )
    # uncaught errors also land in the debug log (dev_mode + --verbose)
    reporter.attach_listener(debug_error)
    return reporter


# * Raise & catch a three-link chain so every placeholder has real values
def sample_error_chain() -> Exception:
    def load_config() -> None:
        raise FileNotFoundError(2, "No such file or directory", "settings.toml")

    def parse_config() -> None:
        try:
            load_config()
        except FileNotFoundError as e:
            raise RuntimeError("configuration could not be loaded") from e

    try:
        try:
            parse_config()
        except RuntimeError as e:
            raise ValueError("application failed to start") from e
    except ValueError as e:
        return e
    raise RuntimeError("sample chain was not raised")
