# rusuku/config/settings.py
# Dashboard settings: grid shape, cell size, header split & polling cadence (read-only, never written back)

import os
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, cast

import typer

from ..core.exceptions import JSONParsingError, SettingsValidationError
from ..core.render_model import DEFAULT_TITLE, LayoutOptions
from ..rusuku_io.generics import read_json_safe


# * Default settings dataclass for the dashboard w/ grid geometry & loop timing
@dataclass
class DashboardSettings:
    # grid shape
    grid_rows: int = 3
    grid_cols: int = 3

    # max cell extent in terminal cells
    max_cell_width: int = 18
    max_cell_height: int = 18

    # header band share of the screen height
    header_percent: int = 15

    # bounded wait for a key before re-rendering
    poll_interval_ms: int = 10
    refresh_per_second: int = 30

    title: str = DEFAULT_TITLE

    # palette name from ui/theming/theme_definitions.py
    theme: str = "classic"

    # dev mode setting (allows DEBUG output level)
    dev_mode: bool = False

    def __post_init__(self) -> None:
        for name in ("grid_rows", "grid_cols", "max_cell_width", "max_cell_height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")

        if isinstance(self.header_percent, bool) or not isinstance(self.header_percent, int):
            raise ValueError(
                f"header_percent must be an integer, got {type(self.header_percent).__name__}"
            )
        if not 0 <= self.header_percent <= 100:
            raise ValueError(f"header_percent must be 0-100, got {self.header_percent}")

        if not isinstance(self.poll_interval_ms, int) or not 1 <= self.poll_interval_ms <= 1000:
            raise ValueError(
                f"poll_interval_ms must be 1-1000, got {self.poll_interval_ms!r}"
            )

        if not isinstance(self.refresh_per_second, int) or self.refresh_per_second < 1:
            raise ValueError(
                f"refresh_per_second must be a positive integer, got {self.refresh_per_second!r}"
            )

        if not isinstance(self.title, str):
            raise ValueError(f"title must be a string, got {type(self.title).__name__}")

        if not isinstance(self.theme, str) or not self.theme:
            raise ValueError(f"theme must be a non-empty string, got {self.theme!r}")

        # dev_mode strict bool validation (no coercion)
        if not isinstance(self.dev_mode, bool):
            raise ValueError(
                f"dev_mode must be a boolean (true/false), "
                f"got {type(self.dev_mode).__name__}: {self.dev_mode}"
            )

    @property
    def poll_interval(self) -> float:
        return self.poll_interval_ms / 1000

    def layout_options(self) -> LayoutOptions:
        return LayoutOptions(
            header_percent=self.header_percent,
            max_cell_width=self.max_cell_width,
            max_cell_height=self.max_cell_height,
            title=self.title,
        )

    # copy w/ CLI overrides applied; None means "keep current value"
    def with_overrides(self, **overrides: Any) -> "DashboardSettings":
        known = {f.name for f in fields(self)}
        changes = {}
        for key, value in overrides.items():
            if key not in known:
                raise SettingsValidationError(f"Unknown setting: {key}", key, value)
            if value is not None:
                changes[key] = value
        try:
            return replace(self, **changes)
        except ValueError as e:
            # validation messages lead w/ the offending setting name
            key = str(e).split(" ", 1)[0]
            raise SettingsValidationError(str(e), key, changes.get(key)) from e


# * Config location: $RUSUKU_CONFIG when set, else ~/.rusuku/config.json
def default_config_path() -> Path:
    override = os.environ.get("RUSUKU_CONFIG")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".rusuku" / "config.json"


# * Settings loader reading an optional JSON config; missing file means defaults
class SettingsManager:
    def __init__(self, config_path: Optional[Path] = None):
        self._config_path = config_path
        self._settings: Optional[DashboardSettings] = None

    # resolved lazily so a .env loaded after import still applies
    @property
    def config_path(self) -> Path:
        return self._config_path or default_config_path()

    @config_path.setter
    def config_path(self, path: Optional[Path]) -> None:
        self._config_path = path
        self._settings = None

    # load settings from file or return defaults
    def load(self) -> DashboardSettings:
        if self._settings is not None:
            return self._settings

        if self.config_path.exists():
            try:
                data = read_json_safe(self.config_path)
                self._settings = DashboardSettings(**data)
            except (JSONParsingError, TypeError, ValueError) as e:
                typer.echo(f"Warning: Invalid config file {self.config_path}: {e}")
                typer.echo("Using default settings")
                self._settings = DashboardSettings()
        else:
            self._settings = DashboardSettings()

        return self._settings

    # get a specific setting value
    def get(self, key: str) -> Any:
        settings = self.load()
        return getattr(settings, key, None)

    # drop cached settings so the next load() re-reads the file
    def reset_cache(self) -> None:
        self._settings = None

    # list all settings as a dictionary
    def list_settings(self) -> Dict[str, Any]:
        return asdict(self.load())


# global settings manager instance
settings_manager = SettingsManager()


# * Retrieve settings preferring injected object from Typer context
def get_settings(
    ctx: typer.Context, provided: Optional[DashboardSettings] = None
) -> DashboardSettings:
    # prefer explicitly provided settings
    if provided is not None:
        return provided

    # search ctx, parent, & root for DashboardSettings
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
        if isinstance(obj, DashboardSettings):
            return obj

    # fallback to loading from disk
    return settings_manager.load()
