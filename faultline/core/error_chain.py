# faultline/core/error_chain.py
# Error records & causal chain traversal for Python exceptions & duck-typed error sources (pure - no I/O)

from __future__ import annotations

import traceback
from dataclasses import dataclass
from typing import Any, Optional, Protocol, runtime_checkable

from .exceptions import ErrorChainCycleError, ErrorChainDepthError

DEFAULT_MAX_DEPTH = 100

# modules whose exception classes are reported by bare name
_UNQUALIFIED_MODULES = {"builtins", "__main__"}


# * Anything that can be reported w/o being a Python exception
@runtime_checkable
class ErrorSource(Protocol):
    class_name: str
    message: str
    code: int
    file: str
    line: int
    stack: str
    previous: Optional[Any]


# * Field values substituted into one rendered block
@dataclass(frozen=True)
class ErrorRecord:
    class_name: str
    message: str
    code: int
    file: str
    line: int
    stack: str


# * Reported type name: bare for builtins & __main__, module-qualified otherwise
def class_name_of(exc_type: type) -> str:
    if exc_type.__module__ in _UNQUALIFIED_MODULES:
        return exc_type.__qualname__
    return f"{exc_type.__module__}.{exc_type.__qualname__}"


# * Numeric code from `code` or `errno` attributes, 0 when neither is an int
def code_of(exc: BaseException) -> int:
    for attr in ("code", "errno"):
        value = getattr(exc, attr, None)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    return 0


# * File & line of the innermost traceback frame ("", 0 if never raised)
def location_of(exc: BaseException) -> tuple[str, int]:
    if exc.__traceback__ is None:
        return "", 0
    frames = traceback.extract_tb(exc.__traceback__)
    if not frames:
        return "", 0
    innermost = frames[-1]
    return innermost.filename, innermost.lineno or 0


# * Formatted traceback text w/o trailing newline
def stack_of(exc: BaseException) -> str:
    if exc.__traceback__ is None:
        return ""
    return "".join(traceback.format_tb(exc.__traceback__)).rstrip("\n")


# * Adapt an exception or ErrorSource into an ErrorRecord
def describe(error: Any) -> ErrorRecord:
    if isinstance(error, BaseException):
        file, line = location_of(error)
        return ErrorRecord(
            class_name=class_name_of(type(error)),
            message=str(error),
            code=code_of(error),
            file=file,
            line=line,
            stack=stack_of(error),
        )
    if isinstance(error, ErrorSource):
        return ErrorRecord(
            class_name=error.class_name,
            message=error.message,
            code=error.code,
            file=error.file,
            line=error.line,
            stack=error.stack,
        )
    raise TypeError(
        f"Cannot report {type(error).__name__}: expected an exception or ErrorSource"
    )


# * Prior error: explicit cause, else implicit context unless suppressed
def cause_of(error: Any) -> Any:
    if isinstance(error, BaseException):
        if error.__cause__ is not None:
            return error.__cause__
        if error.__suppress_context__:
            return None
        return error.__context__
    return getattr(error, "previous", None)


# * Chain outermost first; rejects cycles & chains longer than max_depth
def walk_chain(error: Any, max_depth: int = DEFAULT_MAX_DEPTH) -> list[Any]:
    chain: list[Any] = []
    seen: set[int] = set()
    current = error
    while current is not None:
        # ids stay valid since every visited error is held by chain
        if id(current) in seen:
            raise ErrorChainCycleError(
                f"Error chain loops back to {type(current).__name__} at depth {len(chain)}",
                depth=len(chain),
            )
        if len(chain) >= max_depth:
            raise ErrorChainDepthError(
                f"Error chain exceeds {max_depth} linked errors", max_depth=max_depth
            )
        seen.add(id(current))
        chain.append(current)
        current = cause_of(current)
    return chain
