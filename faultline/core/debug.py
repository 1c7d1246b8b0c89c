# faultline/core/debug.py
# Debug logging: only reaches the console when --verbose runs w/ dev_mode

from .output import OutputLevel, get_log


def debug_print(message: str, category: str = "DEBUG") -> None:
    get_log().log(OutputLevel.DEBUG, category, message)


# * Log error details; the (error) call shape lets the reporter use it as a listener
def debug_error(error: object, context: str = "") -> None:
    error_msg = f"Exception: {type(error).__name__}: {error}"
    if context:
        error_msg = f"{context} - {error_msg}"
    get_log().log(OutputLevel.DEBUG, "ERROR", error_msg)
