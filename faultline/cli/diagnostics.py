# faultline/cli/diagnostics.py
# Rich-backed diagnostic log: levelled lines on stderr plus an optional plain-text log file

from __future__ import annotations

import time
from datetime import datetime
from pathlib import Path
from typing import IO, Optional

from rich.text import Text

from ..core.exceptions import FileOperationError
from ..core.output import OutputLevel

_CATEGORY_STYLES = {
    OutputLevel.VERBOSE: "bold cyan",
    OutputLevel.DEBUG: "magenta",
}


class ConsoleLog:
    # Lines are assembled as Text, so exception messages, script arguments & paths
    # are printed literally; Rich never parses them as markup

    def __init__(self, level: OutputLevel = OutputLevel.NORMAL, log_file: Optional[Path] = None):
        self.level = level
        self.log_file = log_file
        self._started = time.monotonic()
        self._handle: Optional[IO[str]] = None
        if log_file is not None:
            self._open(log_file)

    def enabled(self, level: OutputLevel) -> bool:
        return self.level >= level

    def log(
        self, level: OutputLevel, category: str, message: str, detail: Optional[str] = None
    ) -> None:
        if not self.enabled(level):
            return
        from ..fault_io.console import err_console

        elapsed = f"{time.monotonic() - self._started:.2f}s"
        err_console.print(
            Text.assemble(
                (f"[{elapsed}] ", "dim"),
                (f"[{category}]", _CATEGORY_STYLES.get(level, "bold")),
                " ",
                message,
            ),
            soft_wrap=True,
        )
        self._write(f"[{elapsed}] [{category}] {message}")
        for line in (detail or "").splitlines():
            err_console.print(Text(f"  {line}", style="dim"), soft_wrap=True)
            self._write(f"  {line}")

    # * Mark the end of the run in the log file & release it
    def close(self) -> None:
        if self._handle is None:
            return
        self._write(f"== faultline session ended {_now()} ==")
        self._handle.close()
        self._handle = None

    def _open(self, log_file: Path) -> None:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            self._handle = open(log_file, "a", encoding="utf-8")
        except OSError as e:
            raise FileOperationError(f"Could not open log file {log_file}: {e}", log_file) from e
        self._write(f"== faultline session started {_now()} (level {self.level.name}) ==")

    def _write(self, line: str) -> None:
        if self._handle is not None:
            self._handle.write(f"{line}\n")
            self._handle.flush()


def _now() -> str:
    return datetime.now().isoformat(timespec="seconds")
