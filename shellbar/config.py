"""Bar configuration: schema, defaults, loading and change watching."""

from __future__ import annotations

import logging
import os
import re
import string
import time
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, TypeVar, Union

import yaml

log = logging.getLogger(__name__)

CONFIG_FILE_NAME = "shellbar.yml"

TRACE = 5
OFF = logging.CRITICAL + 10

RGB = tuple[int, int, int]

_U32_MAX = 2**32 - 1
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1

T = TypeVar("T")


class ConfigError(ValueError):
    """Raised when a configuration cannot be read or is invalid."""


def parse_hex_color(text: Any) -> RGB:
    """Parse ``#RGB``, ``#RGBA``, ``#RRGGBB`` or ``#RRGGBBAA`` into an RGB triple."""
    if not isinstance(text, str):
        raise ConfigError(f"expected a hex color string, found {text!r}")
    if not text.startswith("#"):
        raise ConfigError(f"hex color must start with '#': {text!r}")
    digits = text[1:]
    if len(digits) not in (3, 4, 6, 8) or any(c not in string.hexdigits for c in digits):
        raise ConfigError(f"invalid hex color: {text!r}")
    if len(digits) in (3, 4):
        digits = "".join(c * 2 for c in digits)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


@dataclass(frozen=True)
class Color:
    """A color with float channels in the range 0..1."""

    r: float
    g: float
    b: float
    a: float = 1.0

    @classmethod
    def from_rgb8(cls, r: int, g: int, b: int) -> Color:
        return cls(r / 255, g / 255, b / 255, 1.0)


@dataclass(frozen=True)
class Pair:
    """A background color together with the text color drawn on it."""

    color: Color
    text: Color


def _to_color(rgb: RGB) -> Color:
    return Color.from_rgb8(*rgb)


@dataclass(frozen=True)
class AppearanceColor:
    """A base color with optional strong, weak and text variants."""

    base: RGB
    strong: RGB | None = None
    weak: RGB | None = None
    text: RGB | None = None

    @classmethod
    def from_value(cls, value: Any) -> AppearanceColor:
        """Build from a hex string or a mapping with ``base`` and optional variants."""
        if isinstance(value, str):
            return cls(parse_hex_color(value))
        if isinstance(value, Mapping):
            if value.get("base") is None:
                raise ConfigError("color: missing field 'base'")

            def optional(key: str) -> RGB | None:
                raw = value.get(key)
                return None if raw is None else parse_hex_color(raw)

            return cls(
                base=parse_hex_color(value["base"]),
                strong=optional("strong"),
                weak=optional("weak"),
                text=optional("text"),
            )
        raise ConfigError(f"data did not match any color variant: {value!r}")

    def get_base(self) -> Color:
        return _to_color(self.base)

    def get_text(self) -> Color | None:
        return None if self.text is None else _to_color(self.text)

    def _pair(self, variant: RGB | None, text_fallback: Color) -> Pair | None:
        if variant is None:
            return None
        text = self.get_text()
        return Pair(_to_color(variant), text if text is not None else text_fallback)

    def get_weak_pair(self, text_fallback: Color) -> Pair | None:
        return self._pair(self.weak, text_fallback)

    def get_strong_pair(self, text_fallback: Color) -> Pair | None:
        return self._pair(self.strong, text_fallback)


_PRIMARY: RGB = (250, 179, 135)

DEFAULT_BACKGROUND_COLOR = AppearanceColor(
    base=(30, 30, 46), strong=(69, 71, 90), weak=(49, 50, 68)
)
DEFAULT_PRIMARY_COLOR = AppearanceColor(base=_PRIMARY, text=(30, 30, 46))
DEFAULT_SECONDARY_COLOR = AppearanceColor(base=(17, 17, 27), strong=(24, 24, 37))
DEFAULT_SUCCESS_COLOR = AppearanceColor(base=(166, 227, 161))
DEFAULT_DANGER_COLOR = AppearanceColor(base=(243, 139, 168), weak=(249, 226, 175))
DEFAULT_TEXT_COLOR = AppearanceColor(base=(205, 214, 244))


def _default_workspace_colors() -> list[AppearanceColor]:
    return [
        AppearanceColor(_PRIMARY),
        AppearanceColor((180, 190, 254)),
        AppearanceColor((203, 166, 247)),
    ]


# --- value converters -------------------------------------------------------


def _expect_mapping(value: Any, where: str) -> Mapping:
    if not isinstance(value, Mapping):
        raise ConfigError(f"{where}: expected a mapping, found {value!r}")
    return value


def _string(value: Any, where: str) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"{where}: expected a string, found {value!r}")
    return value


def _boolean(value: Any, where: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{where}: expected a boolean, found {value!r}")
    return value


def _integer(value: Any, where: str, low: int, high: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{where}: expected an integer, found {value!r}")
    if not low <= value <= high:
        raise ConfigError(f"{where}: {value} is out of range {low}..{high}")
    return value


def _unsigned(value: Any, where: str) -> int:
    return _integer(value, where, 0, _U32_MAX)


def _signed(value: Any, where: str) -> int:
    return _integer(value, where, _I32_MIN, _I32_MAX)


def _choice(enum_cls: type[Enum]) -> Callable[[Any, str], Any]:
    def convert(value: Any, where: str) -> Any:
        if isinstance(value, str):
            for member in enum_cls:
                if member.value == value:
                    return member
        names = ", ".join(m.value for m in enum_cls)
        raise ConfigError(f"{where}: unknown variant {value!r}, expected one of {names}")

    return convert


def _color(value: Any, where: str) -> AppearanceColor:
    try:
        return AppearanceColor.from_value(value)
    except ConfigError as err:
        raise ConfigError(f"{where}: {err}") from None


def _color_list(value: Any, where: str) -> list[AppearanceColor]:
    if not isinstance(value, list):
        raise ConfigError(f"{where}: expected a list, found {value!r}")
    return [_color(item, f"{where}[{i}]") for i, item in enumerate(value)]


def _get(
    data: Mapping,
    key: str,
    convert: Callable[[Any, str], T],
    default: Callable[[], T],
    where: str,
) -> T:
    if key not in data:
        return default()
    value = data[key]
    if value is None:
        raise ConfigError(f"{where}.{key}: expected a value, found null")
    return convert(value, f"{where}.{key}")


def _optional(
    data: Mapping, key: str, convert: Callable[[Any, str], T], where: str
) -> T | None:
    value = data.get(key)
    return None if value is None else convert(value, f"{where}.{key}")


def _required(
    data: Mapping, key: str, convert: Callable[[Any, str], T], where: str
) -> T:
    if data.get(key) is None:
        raise ConfigError(f"{where}: missing field '{key}'")
    return convert(data[key], f"{where}.{key}")


# --- schema -----------------------------------------------------------------


class WorkspaceVisibilityMode(Enum):
    ALL = "All"
    MONITOR_SPECIFIC = "MonitorSpecific"


class Position(Enum):
    TOP = "Top"
    BOTTOM = "Bottom"


class ModuleName(Enum):
    APP_LAUNCHER = "AppLauncher"
    UPDATES = "Updates"
    CLIPBOARD = "Clipboard"
    WORKSPACES = "Workspaces"
    WINDOW_TITLE = "WindowTitle"
    SYSTEM_INFO = "SystemInfo"
    KEYBOARD_LAYOUT = "KeyboardLayout"
    KEYBOARD_SUBMAP = "KeyboardSubmap"
    TRAY = "Tray"
    CLOCK = "Clock"
    PRIVACY = "Privacy"
    SETTINGS = "Settings"
    MEDIA_PLAYER = "MediaPlayer"


ModuleDef = Union[ModuleName, tuple[ModuleName, ...]]

_module_name = _choice(ModuleName)


def _module_def(value: Any, where: str) -> ModuleDef:
    if isinstance(value, str):
        return _module_name(value, where)
    if isinstance(value, list):
        return tuple(_module_name(item, f"{where}[{i}]") for i, item in enumerate(value))
    raise ConfigError(f"{where}: expected a module name or a list of names, found {value!r}")


def _module_defs(value: Any, where: str) -> list[ModuleDef]:
    if not isinstance(value, list):
        raise ConfigError(f"{where}: expected a list, found {value!r}")
    return [_module_def(item, f"{where}[{i}]") for i, item in enumerate(value)]


@dataclass
class UpdatesModuleConfig:
    check_cmd: str
    update_cmd: str

    @classmethod
    def _from_mapping(cls, value: Any, where: str) -> UpdatesModuleConfig:
        data = _expect_mapping(value, where)
        return cls(
            check_cmd=_required(data, "checkCmd", _string, where),
            update_cmd=_required(data, "updateCmd", _string, where),
        )


@dataclass
class WorkspacesModuleConfig:
    visibility_mode: WorkspaceVisibilityMode = WorkspaceVisibilityMode.ALL
    enable_workspace_filling: bool = False

    @classmethod
    def _from_mapping(cls, value: Any, where: str) -> WorkspacesModuleConfig:
        data = _expect_mapping(value, where)
        return cls(
            visibility_mode=_get(
                data,
                "visibilityMode",
                _choice(WorkspaceVisibilityMode),
                lambda: WorkspaceVisibilityMode.ALL,
                where,
            ),
            enable_workspace_filling=_get(
                data, "enableWorkspaceFilling", _boolean, lambda: False, where
            ),
        )


@dataclass
class SystemModuleConfig:
    cpu_warn_threshold: int = 60
    cpu_alert_threshold: int = 80
    mem_warn_threshold: int = 70
    mem_alert_threshold: int = 85
    temp_warn_threshold: int = 60
    temp_alert_threshold: int = 80

    @classmethod
    def _from_mapping(cls, value: Any, where: str) -> SystemModuleConfig:
        data = _expect_mapping(value, where)
        defaults = cls()
        return cls(
            cpu_warn_threshold=_get(
                data, "cpuWarnThreshold", _unsigned, lambda: defaults.cpu_warn_threshold, where
            ),
            cpu_alert_threshold=_get(
                data, "cpuAlertThreshold", _unsigned, lambda: defaults.cpu_alert_threshold, where
            ),
            mem_warn_threshold=_get(
                data, "memWarnThreshold", _unsigned, lambda: defaults.mem_warn_threshold, where
            ),
            mem_alert_threshold=_get(
                data, "memAlertThreshold", _unsigned, lambda: defaults.mem_alert_threshold, where
            ),
            temp_warn_threshold=_get(
                data, "tempWarnThreshold", _signed, lambda: defaults.temp_warn_threshold, where
            ),
            temp_alert_threshold=_get(
                data, "tempAlertThreshold", _signed, lambda: defaults.temp_alert_threshold, where
            ),
        )


@dataclass
class ClockModuleConfig:
    format: str = "%a %d %b %R"

    @classmethod
    def _from_mapping(cls, value: Any, where: str) -> ClockModuleConfig:
        data = _expect_mapping(value, where)
        return cls(format=_required(data, "format", _string, where))


@dataclass
class SettingsModuleConfig:
    lock_cmd: str | None = None
    audio_sinks_more_cmd: str | None = None
    audio_sources_more_cmd: str | None = None
    wifi_more_cmd: str | None = None
    vpn_more_cmd: str | None = None
    bluetooth_more_cmd: str | None = None

    @classmethod
    def _from_mapping(cls, value: Any, where: str) -> SettingsModuleConfig:
        data = _expect_mapping(value, where)
        return cls(
            lock_cmd=_optional(data, "lockCmd", _string, where),
            audio_sinks_more_cmd=_optional(data, "audioSinksMoreCmd", _string, where),
            audio_sources_more_cmd=_optional(data, "audioSourcesMoreCmd", _string, where),
            wifi_more_cmd=_optional(data, "wifiMoreCmd", _string, where),
            vpn_more_cmd=_optional(data, "vpnMoreCmd", _string, where),
            bluetooth_more_cmd=_optional(data, "bluetoothMoreCmd", _string, where),
        )


@dataclass
class MediaPlayerModuleConfig:
    max_title_length: int = 100

    @classmethod
    def _from_mapping(cls, value: Any, where: str) -> MediaPlayerModuleConfig:
        data = _expect_mapping(value, where)
        return cls(
            max_title_length=_get(data, "maxTitleLength", _unsigned, lambda: 100, where)
        )


@dataclass
class Appearance:
    background_color: AppearanceColor = DEFAULT_BACKGROUND_COLOR
    primary_color: AppearanceColor = DEFAULT_PRIMARY_COLOR
    secondary_color: AppearanceColor = DEFAULT_SECONDARY_COLOR
    success_color: AppearanceColor = DEFAULT_SUCCESS_COLOR
    danger_color: AppearanceColor = DEFAULT_DANGER_COLOR
    text_color: AppearanceColor = DEFAULT_TEXT_COLOR
    workspace_colors: list[AppearanceColor] = field(default_factory=_default_workspace_colors)
    special_workspace_colors: list[AppearanceColor] | None = None

    @classmethod
    def _from_mapping(cls, value: Any, where: str) -> Appearance:
        data = _expect_mapping(value, where)
        return cls(
            background_color=_get(
                data, "backgroundColor", _color, lambda: DEFAULT_BACKGROUND_COLOR, where
            ),
            primary_color=_get(
                data, "primaryColor", _color, lambda: DEFAULT_PRIMARY_COLOR, where
            ),
            secondary_color=_get(
                data, "secondaryColor", _color, lambda: DEFAULT_SECONDARY_COLOR, where
            ),
            success_color=_get(
                data, "successColor", _color, lambda: DEFAULT_SUCCESS_COLOR, where
            ),
            danger_color=_get(data, "dangerColor", _color, lambda: DEFAULT_DANGER_COLOR, where),
            text_color=_get(data, "textColor", _color, lambda: DEFAULT_TEXT_COLOR, where),
            workspace_colors=_get(
                data, "workspaceColors", _color_list, _default_workspace_colors, where
            ),
            special_workspace_colors=_optional(
                data, "specialWorkspaceColors", _color_list, where
            ),
        )


def _default_left() -> list[ModuleDef]:
    return [ModuleName.WORKSPACES]


def _default_center() -> list[ModuleDef]:
    return [ModuleName.WINDOW_TITLE]


def _default_right() -> list[ModuleDef]:
    return [(ModuleName.CLOCK, ModuleName.PRIVACY, ModuleName.SETTINGS)]


@dataclass
class Modules:
    """Modules shown in the three sections of the bar."""

    left: list[ModuleDef] = field(default_factory=_default_left)
    center: list[ModuleDef] = field(default_factory=_default_center)
    right: list[ModuleDef] = field(default_factory=_default_right)

    @classmethod
    def _from_mapping(cls, value: Any, where: str) -> Modules:
        data = _expect_mapping(value, where)
        return cls(
            left=_get(data, "left", _module_defs, list, where),
            center=_get(data, "center", _module_defs, list, where),
            right=_get(data, "right", _module_defs, list, where),
        )


_OUTPUT_KINDS = ("All", "Active", "Targets")


@dataclass(frozen=True)
class Outputs:
    """Which outputs the bar appears on: all, the active one, or named targets."""

    kind: str = "All"
    targets: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "targets", tuple(self.targets))
        if self.kind not in _OUTPUT_KINDS:
            raise ConfigError(f"unknown outputs variant {self.kind!r}")
        if self.kind == "Targets" and not self.targets:
            raise ConfigError("outputs targets: need non-empty")
        if self.kind != "Targets" and self.targets:
            raise ConfigError(f"outputs variant {self.kind!r} takes no targets")

    @classmethod
    def from_value(cls, value: Any) -> Outputs:
        """Build from ``"All"``, ``"Active"`` or ``{"Targets": [names...]}``."""
        if isinstance(value, str):
            if value not in ("All", "Active"):
                raise ConfigError(f"invalid outputs value {value!r}")
            return cls(value)
        if isinstance(value, Mapping) and len(value) == 1:
            (key, targets), = value.items()
            if key != "Targets":
                raise ConfigError(f"unknown outputs variant {key!r}")
            if not isinstance(targets, list) or not all(isinstance(t, str) for t in targets):
                raise ConfigError("outputs targets: expected a list of output names")
            return cls("Targets", tuple(targets))
        raise ConfigError(f"invalid outputs value {value!r}")


def _outputs(value: Any, where: str) -> Outputs:
    try:
        return Outputs.from_value(value)
    except ConfigError as err:
        raise ConfigError(f"{where}: {err}") from None


@dataclass
class Config:
    """Complete bar configuration."""

    log_level: str = "warn"
    position: Position = Position.TOP
    outputs: Outputs = field(default_factory=Outputs)
    modules: Modules = field(default_factory=Modules)
    app_launcher_cmd: str | None = None
    clipboard_cmd: str | None = None
    truncate_title_after_length: int = 150
    updates: UpdatesModuleConfig | None = None
    workspaces: WorkspacesModuleConfig = field(default_factory=WorkspacesModuleConfig)
    system: SystemModuleConfig = field(default_factory=SystemModuleConfig)
    clock: ClockModuleConfig = field(default_factory=ClockModuleConfig)
    settings: SettingsModuleConfig = field(default_factory=SettingsModuleConfig)
    appearance: Appearance = field(default_factory=Appearance)
    media_player: MediaPlayerModuleConfig = field(default_factory=MediaPlayerModuleConfig)

    @classmethod
    def from_dict(cls, data: Any) -> Config:
        """Build a configuration from parsed YAML data with camelCase keys."""
        where = "config"
        data = _expect_mapping({} if data is None else data, where)
        return cls(
            log_level=_get(data, "logLevel", _string, lambda: "warn", where),
            position=_get(data, "position", _choice(Position), lambda: Position.TOP, where),
            outputs=_get(data, "outputs", _outputs, Outputs, where),
            modules=_get(data, "modules", Modules._from_mapping, Modules, where),
            app_launcher_cmd=_optional(data, "appLauncherCmd", _string, where),
            clipboard_cmd=_optional(data, "clipboardCmd", _string, where),
            truncate_title_after_length=_get(
                data, "truncateTitleAfterLength", _unsigned, lambda: 150, where
            ),
            updates=_optional(data, "updates", UpdatesModuleConfig._from_mapping, where),
            workspaces=_get(
                data,
                "workspaces",
                WorkspacesModuleConfig._from_mapping,
                WorkspacesModuleConfig,
                where,
            ),
            system=_get(
                data, "system", SystemModuleConfig._from_mapping, SystemModuleConfig, where
            ),
            clock=_get(data, "clock", ClockModuleConfig._from_mapping, ClockModuleConfig, where),
            settings=_get(
                data, "settings", SettingsModuleConfig._from_mapping, SettingsModuleConfig, where
            ),
            appearance=_get(data, "appearance", Appearance._from_mapping, Appearance, where),
            media_player=_get(
                data,
                "mediaPlayer",
                MediaPlayerModuleConfig._from_mapping,
                MediaPlayerModuleConfig,
                where,
            ),
        )


# --- loading ----------------------------------------------------------------


def load_config(text: str) -> Config:
    """Parse a YAML document into a configuration."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as err:
        raise ConfigError(f"invalid YAML: {err}") from err
    return Config.from_dict(data)


def config_path(home: str | os.PathLike[str] | None = None) -> Path:
    """Return the configuration file location under the given or current home."""
    if home is None:
        home = os.environ.get("HOME")
        if not home:
            raise ConfigError("Could not get HOME environment variable")
    return Path(home) / ".config" / CONFIG_FILE_NAME


def read_config(path: str | os.PathLike[str] | None = None) -> Config:
    """Read the configuration file; a file that cannot be opened gives the defaults."""
    target = Path(path) if path is not None else config_path()
    try:
        text = target.read_text(encoding="utf-8")
    except OSError:
        return Config()
    except UnicodeDecodeError as err:
        raise ConfigError(f"config file is not valid UTF-8: {err}") from err
    log.info("Reading config file")
    return load_config(text)


def _snapshot(path: Path) -> bytes | None:
    try:
        return path.read_bytes()
    except OSError:
        return None


def watch_config(
    path: str | os.PathLike[str] | None = None,
    poll_interval: float = 1.0,
    debounce: float = 0.5,
) -> Iterator[Config]:
    """Yield a new configuration each time the file is created, changed or deleted.

    The current state of the file is recorded when this is called; a deleted
    file yields the default configuration, and a file that fails to parse is
    reported in the log and skipped.
    """
    target = Path(path) if path is not None else config_path()
    return _watch(target, _snapshot(target), poll_interval, debounce)


def _watch(
    path: Path, previous: bytes | None, poll_interval: float, debounce: float
) -> Iterator[Config]:
    while True:
        time.sleep(poll_interval)
        current = _snapshot(path)
        if current == previous:
            continue
        if current is None:
            log.info("Config file deleted")
            previous = None
            yield Config()
            continue
        if previous is None:
            log.info("Config file created")
        else:
            log.info("Config file modified")
            time.sleep(debounce)
            current = _snapshot(path)
        previous = current
        try:
            config = read_config(path)
        except ConfigError as err:
            log.warning("Failed to read config file: %s", err)
            continue
        yield config


_LEVELS = {
    "off": OFF,
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": TRACE,
}

_MODULE_NAME = re.compile(r"^[A-Za-z0-9_:]+$")


def log_level_from_spec(spec: str) -> int:
    """Return the default logging level of a spec such as ``"info, net=debug"``.

    Items of the form ``module=level`` and bare module names are validated
    but do not change the default, which is off when none is given.
    """
    default = OFF
    for raw in spec.split(","):
        item = raw.strip()
        if not item:
            continue
        module, sep, level = item.partition("=")
        module = module.strip()
        if sep:
            if not _MODULE_NAME.match(module):
                raise ConfigError(f"Failed to parse log level: invalid module name {module!r}")
            if level.strip().lower() not in _LEVELS:
                raise ConfigError(f"Failed to parse log level: unknown level {level.strip()!r}")
            continue
        if item.lower() in _LEVELS:
            default = _LEVELS[item.lower()]
        elif not _MODULE_NAME.match(item):
            raise ConfigError(f"Failed to parse log level: invalid item {item!r}")
    return default