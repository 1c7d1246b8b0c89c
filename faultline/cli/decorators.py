# faultline/cli/decorators.py
# CLI decorators for reporting uncaught errors & faultline's own failures

import functools
from typing import Callable, TypeVar, Any, cast

from ..core.exceptions import (
    FaultlineError,
    ErrorChainError,
    ConfigurationError,
    JSONParsingError,
    FileOperationError,
    format_error_message,
)
from ..core.reporter import ErrorReporter

F = TypeVar("F", bound=Callable[..., Any])


# * Decorator turning an uncaught Exception into SystemExit w/ the reporter's exit code
def report_errors(reporter: ErrorReporter) -> Callable[[F], F]:
    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                # SystemExit & KeyboardInterrupt are not Exception subclasses & pass through
                raise SystemExit(reporter.invoke(e)) from e

        return cast(F, wrapper)

    return decorator


# * Decorator for handling faultline's own errors in CLI commands w/ Rich output
def handle_faultline_error(func: F) -> F:
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        # ! Lazy import to avoid circular dependencies
        from ..fault_io.console import err_console

        try:
            return func(*args, **kwargs)
        except ErrorChainError as e:
            err_console.print(format_error_message("Error Chain Error", str(e)))
            raise SystemExit(1)
        except ConfigurationError as e:
            err_console.print(format_error_message("Configuration Error", str(e)))
            raise SystemExit(1)
        except JSONParsingError as e:
            err_console.print(format_error_message("JSON Parsing Error", str(e)))
            raise SystemExit(1)
        except FileOperationError as e:
            err_console.print(format_error_message("File Error", str(e)))
            raise SystemExit(1)
        except FaultlineError as e:
            err_console.print(format_error_message("Error", str(e)))
            raise SystemExit(1)

    return cast(F, wrapper)
