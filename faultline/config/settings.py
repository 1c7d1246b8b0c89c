# faultline/config/settings.py
# Configuration management for faultline: report template, exit code, style & chain bounds

from pathlib import Path
from typing import Dict, Any, Optional, cast
import typer
from dataclasses import dataclass, asdict

from rich.errors import StyleSyntaxError
from rich.style import Style

from ..fault_io.generics import read_json_safe, write_json_safe
from ..fault_io.console import DEFAULT_ERROR_STYLE
from ..core.error_chain import DEFAULT_MAX_DEPTH
from ..core.exceptions import FileReadError, JSONParsingError, SettingsValidationError
from ..core.reporter import DEFAULT_EXIT_CODE
from ..core.template import DEFAULT_TEMPLATE


# * Default settings dataclass for faultline reports
@dataclass
class FaultlineSettings:
    # message template (None = built-in banner template)
    template: Optional[str] = None

    # process exit status returned for reported errors
    exit_code: int = DEFAULT_EXIT_CODE

    # Rich style applied to the whole report
    style: str = DEFAULT_ERROR_STYLE

    # longest causal chain rendered before the input is rejected
    max_chain_depth: int = DEFAULT_MAX_DEPTH

    # dev mode setting (enables DEBUG output w/ --verbose)
    dev_mode: bool = False

    def __post_init__(self) -> None:
        if self.template is not None and not isinstance(self.template, str):
            raise ValueError(
                f"template must be a string or null, got {type(self.template).__name__}"
            )

        # exit_code strict int validation; 0 would report success
        if (
            not isinstance(self.exit_code, int)
            or isinstance(self.exit_code, bool)
            or not 1 <= self.exit_code <= 255
        ):
            raise ValueError(f"exit_code must be an integer 1-255, got {self.exit_code!r}")

        if not isinstance(self.style, str):
            raise ValueError(f"style must be a string, got {type(self.style).__name__}")
        try:
            Style.parse(self.style)
        except StyleSyntaxError as e:
            raise ValueError(f"style is not a valid Rich style: {e}") from e

        if (
            not isinstance(self.max_chain_depth, int)
            or isinstance(self.max_chain_depth, bool)
            or self.max_chain_depth < 1
        ):
            raise ValueError(
                f"max_chain_depth must be a positive integer, got {self.max_chain_depth!r}"
            )

        # dev_mode strict bool validation (no coercion)
        if not isinstance(self.dev_mode, bool):
            raise ValueError(
                f"dev_mode must be a boolean (true/false), "
                f"got {type(self.dev_mode).__name__}: {self.dev_mode}"
            )

    @property
    def resolved_template(self) -> str:
        return self.template if self.template is not None else DEFAULT_TEMPLATE


# * Settings management class w/ JSON persistence for loading, saving, & modifying settings
class SettingsManager:
    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = config_path or Path.home() / ".faultline" / "config.json"
        self._settings: Optional[FaultlineSettings] = None

    # load settings from file or return defaults
    def load(self) -> FaultlineSettings:
        if self._settings is not None:
            return self._settings

        if self.config_path.exists():
            try:
                data = read_json_safe(self.config_path)
                self._settings = FaultlineSettings(**data)
            except (FileReadError, JSONParsingError, TypeError, ValueError) as e:
                typer.echo(f"Warning: Invalid config file {self.config_path}: {e}")
                typer.echo("Using default settings")
                self._settings = FaultlineSettings()
        else:
            self._settings = FaultlineSettings()

        return self._settings

    # save settings to file
    def save(self, settings: FaultlineSettings) -> None:
        write_json_safe(asdict(settings), self.config_path)
        self._settings = settings

    # get a specific setting value
    def get(self, key: str) -> Any:
        settings = self.load()
        return getattr(settings, key, None)

    # set a specific setting value; re-validates the whole dataclass before saving
    def set(self, key: str, value: Any) -> None:
        settings = self.load()
        if not hasattr(settings, key):
            raise SettingsValidationError(f"Unknown setting: {key}", key, value)

        data = asdict(settings)
        data[key] = value
        try:
            updated = FaultlineSettings(**data)
        except ValueError as e:
            raise SettingsValidationError(str(e), key, value) from e
        self.save(updated)

    # reset to default settings
    def reset(self) -> None:
        self.save(FaultlineSettings())

    # list all settings as a dictionary
    def list_settings(self) -> Dict[str, Any]:
        return asdict(self.load())


# global settings manager instance
settings_manager = SettingsManager()


# * Retrieve settings preferring injected object from Typer context
def get_settings(
    ctx: typer.Context, provided: Optional[FaultlineSettings] = None
) -> FaultlineSettings:
    if provided is not None:
        return provided

    # search ctx, parent, & root for FaultlineSettings
    candidates: list[typer.Context] = [ctx]
    parent = cast(Optional[typer.Context], getattr(ctx, "parent", None))
    if parent is not None:
        candidates.append(parent)
    find_root = getattr(ctx, "find_root", None)
    root_ctx = (
        cast(Optional[typer.Context], find_root()) if callable(find_root) else None
    )
    if root_ctx is not None:
        candidates.append(root_ctx)

    for c in candidates:
        obj = getattr(c, "obj", None)
        if isinstance(obj, FaultlineSettings):
            return obj

    # fallback to loading from disk
    return settings_manager.load()
