# tests/conftest.py
# Pytest configuration w/ isolation fixtures for deterministic test runs

import io
import json
from pathlib import Path

import pytest
from rich.console import Console


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    # Patch Path.home() to isolated temp directory
    fake_home = tmp_path / "fake_home"
    fake_home.mkdir()

    faultline_dir = fake_home / ".faultline"
    faultline_dir.mkdir()

    # Create minimal config.json w/ test defaults
    config_data = {
        "template": None,
        "exit_code": 1,
        "style": "bold white on red",
        "max_chain_depth": 100,
        "dev_mode": False,
    }

    config_file = faultline_dir / "config.json"
    with open(config_file, "w") as f:
        json.dump(config_data, f, indent=2)

    monkeypatch.setattr(Path, "home", lambda: fake_home)

    # ! reset global settings_manager state & patch its config_path to use isolated location
    from faultline.config.settings import settings_manager

    settings_manager._settings = None
    settings_manager.config_path = config_file

    # ! close & drop any registered diagnostic log for test isolation
    from faultline.core.output import reset_log

    reset_log()

    # ! fresh consoles so recordings & patched files never leak between tests
    from faultline.fault_io.console import reset_console

    reset_console()

    yield fake_home

    reset_log()


class RecordingSink:
    # OutputSink that keeps every written report in order
    def __init__(self) -> None:
        self.writes: list[str] = []

    def write(self, text: str) -> None:
        self.writes.append(text)


@pytest.fixture
def recording_sink():
    return RecordingSink()


@pytest.fixture
def recording_console():
    # Rich console capturing output w/o terminal styling for plain-text asserts
    return Console(
        file=io.StringIO(), record=True, width=80, force_terminal=False, color_system=None
    )
