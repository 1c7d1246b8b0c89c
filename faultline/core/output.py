# faultline/core/output.py
# Diagnostic levels & the log registry that core modules write through
# * Pure: the Rich-backed log lives in faultline/cli/diagnostics.py & is registered at CLI startup

from __future__ import annotations

from enum import IntEnum
from typing import Optional, Protocol, runtime_checkable


# * How much the reporter narrates about itself; NORMAL prints reports only
class OutputLevel(IntEnum):
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


@runtime_checkable
class DiagnosticLog(Protocol):
    def enabled(self, level: OutputLevel) -> bool: ...

    def log(
        self, level: OutputLevel, category: str, message: str, detail: Optional[str] = None
    ) -> None: ...

    def close(self) -> None: ...


# * Default log: drops everything until the CLI registers a real one
class NullLog:
    def enabled(self, level: OutputLevel) -> bool:
        return False

    def log(
        self, level: OutputLevel, category: str, message: str, detail: Optional[str] = None
    ) -> None:
        pass

    def close(self) -> None:
        pass


_log: DiagnosticLog = NullLog()


def register_log(log: DiagnosticLog) -> None:
    global _log
    _log = log


def get_log() -> DiagnosticLog:
    return _log


# * Close the registered log & fall back to NullLog (tests, end of a CLI run)
def reset_log() -> None:
    global _log
    _log.close()
    _log = NullLog()
