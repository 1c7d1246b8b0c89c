# tests/unit/cli/test_diagnostics.py
# Unit tests for the Rich-backed diagnostic log, the core log registry & verbose/debug helpers

import pytest

from faultline.cli.diagnostics import ConsoleLog
from faultline.core.debug import debug_error, debug_print
from faultline.core.exceptions import FileOperationError
from faultline.core.output import (
    DiagnosticLog,
    NullLog,
    OutputLevel,
    get_log,
    register_log,
    reset_log,
)
from faultline.core.verbose import init_verbose, vlog, vlog_render
from faultline.fault_io.console import err_console


@pytest.fixture
def stderr_text(recording_console):
    # route the stderr proxy into a recording console; returns a reader for what was printed
    err_console._set_console(recording_console)
    return recording_console.export_text


class TestLevels:

    # * Test both logs satisfy the registry protocol
    def test_implements_protocol(self):
        assert isinstance(ConsoleLog(), DiagnosticLog)
        assert isinstance(NullLog(), DiagnosticLog)

    # * Test init_verbose picks the level from --verbose & dev_mode
    @pytest.mark.parametrize(
        "enabled, dev_mode, expected",
        [
            (False, False, OutputLevel.NORMAL),
            (False, True, OutputLevel.NORMAL),
            (True, False, OutputLevel.VERBOSE),
            (True, True, OutputLevel.DEBUG),
        ],
    )
    def test_init_verbose_level(self, enabled, dev_mode, expected):
        log = init_verbose(enabled=enabled, dev_mode=dev_mode)

        assert get_log() is log
        assert log.level == expected

    # * Test debug lines are dropped at VERBOSE while verbose lines print
    def test_debug_needs_debug_level(self, stderr_text):
        register_log(ConsoleLog(OutputLevel.VERBOSE))

        vlog("RUN", "shown")
        debug_print("hidden", "LISTEN")

        output = stderr_text()
        assert "[RUN] shown" in output
        assert "hidden" not in output

    # * Test nothing is printed before a log is registered
    def test_null_log_is_silent(self, stderr_text):
        vlog_render(["ValueError"], 10)
        debug_error(ValueError("x"))

        assert stderr_text() == ""


class TestLiteralText:

    # * Test bracketed text in verbose messages & detail is printed as-is
    def test_verbose_brackets(self, stderr_text):
        register_log(ConsoleLog(OutputLevel.VERBOSE))

        vlog("RUN", "Running script.py [/x] [bold]", detail="[/y]\n[red]arg")

        output = stderr_text()
        assert "[RUN] Running script.py [/x] [bold]" in output
        assert "  [/y]\n" in output
        assert "  [red]arg" in output

    # * Test a bracketed exception message survives the debug listener
    def test_debug_error_brackets(self, stderr_text):
        register_log(ConsoleLog(OutputLevel.DEBUG))

        debug_error(ValueError("bad [/x] value"))

        assert "[ERROR] Exception: ValueError: bad [/x] value" in stderr_text()

    # * Test emoji codes in messages are not replaced
    def test_no_emoji_replacement(self, stderr_text):
        register_log(ConsoleLog(OutputLevel.VERBOSE))

        vlog("FILE", "Read: :smile:.txt")

        assert "Read: :smile:.txt" in stderr_text()


class TestLogFile:

    # * Test the log file gets plain-text lines between session markers
    def test_session_lines(self, tmp_path, stderr_text):
        log_file = tmp_path / "logs" / "faultline.log"
        log = ConsoleLog(OutputLevel.VERBOSE, log_file)

        log.log(OutputLevel.VERBOSE, "RENDER", "Rendered 2 error(s) [/x]", "- ValueError")
        log.close()
        log.close()

        lines = log_file.read_text(encoding="utf-8").splitlines()
        assert "session started" in lines[0]
        assert "(level VERBOSE)" in lines[0]
        assert lines[1].endswith("[RENDER] Rendered 2 error(s) [/x]")
        assert lines[2] == "  - ValueError"
        assert "session ended" in lines[3]
        assert len(lines) == 4

    # * Test reset_log closes the registered log & restores the null log
    def test_reset_log_closes(self, tmp_path):
        log_file = tmp_path / "faultline.log"
        register_log(ConsoleLog(OutputLevel.VERBOSE, log_file))

        reset_log()

        assert isinstance(get_log(), NullLog)
        assert "session ended" in log_file.read_text(encoding="utf-8")

    # * Test an unopenable log file is a faultline file error
    def test_unopenable_log_file(self, tmp_path):
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("", encoding="utf-8")

        with pytest.raises(FileOperationError) as exc_info:
            ConsoleLog(OutputLevel.VERBOSE, blocker / "faultline.log")

        assert exc_info.value.path == blocker / "faultline.log"
