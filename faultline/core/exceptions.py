# faultline/core/exceptions.py
# Custom exception hierarchy for faultline (pure - no I/O operations)

from pathlib import Path
from typing import Any

from rich.markup import escape


# * Format error message for display; the message is escaped so it prints literally
def format_error_message(error_type: str, message: str) -> str:
    return f"[red]{error_type}:[/] {escape(message)}"


# * Base exception for faultline's own failures
class FaultlineError(Exception):
    pass


# * Error chain could not be traversed
class ErrorChainError(FaultlineError):
    pass


# * Same error reached twice while walking the causal chain
class ErrorChainCycleError(ErrorChainError):
    def __init__(self, message: str, depth: int):
        super().__init__(message)
        self.depth = depth

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, depth={self.depth!r})"


# * Causal chain longer than the configured bound
class ErrorChainDepthError(ErrorChainError):
    def __init__(self, message: str, max_depth: int):
        super().__init__(message)
        self.max_depth = max_depth

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, max_depth={self.max_depth!r})"
        )


# * Configuration errors
class ConfigurationError(FaultlineError):
    pass


# * Settings value validation failed
class SettingsValidationError(ConfigurationError):
    def __init__(self, message: str, setting_name: str, value: Any):
        super().__init__(message)
        self.setting_name = setting_name
        self.value = value

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, "
            f"setting_name={self.setting_name!r}, value={self.value!r})"
        )


# * JSON parsing errors
class JSONParsingError(FaultlineError):
    pass


# * Base error for file I/O operations
class FileOperationError(FaultlineError):
    def __init__(self, message: str, path: Path | str):
        super().__init__(message)
        self.path = Path(path) if isinstance(path, str) else path

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, path={self.path!r})"


# * Failed to read file
class FileReadError(FileOperationError):
    pass
