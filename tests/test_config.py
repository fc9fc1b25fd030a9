import logging

import pytest

from shellbar.config import (
    Appearance,
    AppearanceColor,
    Color,
    Config,
    ConfigError,
    ModuleName,
    Outputs,
    Pair,
    Position,
    SystemModuleConfig,
    UpdatesModuleConfig,
    WorkspaceVisibilityMode,
    config_path,
    load_config,
    log_level_from_spec,
    parse_hex_color,
    read_config,
    watch_config,
)


def test_defaults_match_source_values():
    config = Config()
    assert config.log_level == "warn"
    assert config.position is Position.TOP
    assert config.outputs == Outputs()
    assert config.outputs.kind == "All"
    assert config.truncate_title_after_length == 150
    assert config.updates is None
    assert config.app_launcher_cmd is None
    assert config.clock.format == "%a %d %b %R"
    assert config.media_player.max_title_length == 100
    assert config.system == SystemModuleConfig(60, 80, 70, 85, 60, 80)
    assert config.workspaces.visibility_mode is WorkspaceVisibilityMode.ALL
    assert config.workspaces.enable_workspace_filling is False


def test_default_modules_layout():
    modules = Config().modules
    assert modules.left == [ModuleName.WORKSPACES]
    assert modules.center == [ModuleName.WINDOW_TITLE]
    assert modules.right == [(ModuleName.CLOCK, ModuleName.PRIVACY, ModuleName.SETTINGS)]


@pytest.mark.parametrize("text", ["", "{}", "# only a comment\n"])
def test_empty_documents_give_defaults(text):
    assert load_config(text) == Config()


def test_camel_case_keys_are_read():
    config = load_config(
        "logLevel: info\n"
        "position: Bottom\n"
        "truncateTitleAfterLength: 42\n"
        "appLauncherCmd: launcher\n"
        "clipboardCmd: clip\n"
        "workspaces:\n"
        "  visibilityMode: MonitorSpecific\n"
        "  enableWorkspaceFilling: true\n"
        "system:\n"
        "  tempWarnThreshold: -5\n"
        "mediaPlayer:\n"
        "  maxTitleLength: 7\n"
        "updates:\n"
        "  checkCmd: check\n"
        "  updateCmd: update\n"
        "settings:\n"
        "  lockCmd: lock\n"
    )
    assert config.log_level == "info"
    assert config.position is Position.BOTTOM
    assert config.truncate_title_after_length == 42
    assert config.app_launcher_cmd == "launcher"
    assert config.clipboard_cmd == "clip"
    assert config.workspaces.visibility_mode is WorkspaceVisibilityMode.MONITOR_SPECIFIC
    assert config.workspaces.enable_workspace_filling is True
    assert config.system.temp_warn_threshold == -5
    assert config.system.cpu_warn_threshold == 60
    assert config.media_player.max_title_length == 7
    assert config.updates == UpdatesModuleConfig("check", "update")
    assert config.settings.lock_cmd == "lock"
    assert config.settings.wifi_more_cmd is None


def test_modules_sections_and_groups():
    config = load_config(
        "modules:\n"
        "  left: [Workspaces, [Clock, Privacy]]\n"
        "  right: [MediaPlayer]\n"
    )
    assert config.modules.left == [
        ModuleName.WORKSPACES,
        (ModuleName.CLOCK, ModuleName.PRIVACY),
    ]
    assert config.modules.center == []
    assert config.modules.right == [ModuleName.MEDIA_PLAYER]


def test_outputs_variants():
    assert load_config("outputs: Active").outputs == Outputs("Active")
    targets = load_config("outputs:\n  Targets: [eDP-1, HDMI-A-1]").outputs
    assert targets.kind == "Targets"
    assert targets.targets == ("eDP-1", "HDMI-A-1")


def test_outputs_targets_must_not_be_empty():
    with pytest.raises(ConfigError):
        Outputs("Targets")
    with pytest.raises(ConfigError):
        Outputs.from_value({"Targets": []})


@pytest.mark.parametrize(
    "text",
    [
        "position: Left",
        "outputs:\n  Targets: []",
        "outputs: Targets",
        "clock: {}",
        "updates:\n  checkCmd: check",
        "system:\n  cpuWarnThreshold: -1",
        "truncateTitleAfterLength: many",
        "modules:\n  left: [Nope]",
        "appearance:\n  primaryColor: red",
        "- a list",
        "logLevel: [",
        "workspaces: null",
    ],
)
def test_invalid_documents_raise(text):
    with pytest.raises(ConfigError):
        load_config(text)


def test_appearance_overrides():
    config = load_config(
        "appearance:\n"
        "  primaryColor: '#112233'\n"
        "  backgroundColor:\n"
        "    base: '#000000'\n"
        "    weak: '#ffffff'\n"
        "    text: '#808080'\n"
        "  specialWorkspaceColors: ['#010203']\n"
    )
    appearance = config.appearance
    assert appearance.primary_color.get_base() == Color.from_rgb8(0x11, 0x22, 0x33)
    fallback = Color.from_rgb8(0, 0, 0)
    assert appearance.background_color.get_weak_pair(fallback) == Pair(
        Color.from_rgb8(0xFF, 0xFF, 0xFF), Color.from_rgb8(0x80, 0x80, 0x80)
    )
    assert appearance.background_color.get_strong_pair(fallback) is None
    assert appearance.success_color == Appearance().success_color
    assert appearance.special_workspace_colors == [AppearanceColor((1, 2, 3))]


def test_default_appearance_colors():
    appearance = Appearance()
    assert appearance.primary_color.get_base() == Color.from_rgb8(250, 179, 135)
    assert appearance.primary_color.get_text() == Color.from_rgb8(30, 30, 46)
    assert appearance.text_color.get_text() is None
    assert len(appearance.workspace_colors) == 3
    assert appearance.workspace_colors[0].base == (250, 179, 135)
    assert appearance.special_workspace_colors is None


def test_simple_color_has_no_variants():
    color = AppearanceColor.from_value("#a6e3a1")
    fallback = Color.from_rgb8(1, 1, 1)
    assert color.get_base() == Color.from_rgb8(0xA6, 0xE3, 0xA1)
    assert color.get_text() is None
    assert color.get_weak_pair(fallback) is None
    assert color.get_strong_pair(fallback) is None


def test_pair_uses_fallback_without_text():
    color = AppearanceColor(base=(1, 2, 3), strong=(4, 5, 6))
    fallback = Color.from_rgb8(7, 8, 9)
    assert color.get_strong_pair(fallback) == Pair(Color.from_rgb8(4, 5, 6), fallback)


def test_complete_color_requires_base():
    with pytest.raises(ConfigError):
        AppearanceColor.from_value({"weak": "#ffffff"})


def test_color_from_rgb8_scales_channels():
    assert Color.from_rgb8(255, 0, 0) == Color(1.0, 0.0, 0.0, 1.0)


@pytest.mark.parametrize("rgb", [(0, 0, 0), (250, 179, 135), (30, 30, 46), (255, 255, 255)])
def test_hex_color_round_trip(rgb):
    text = "#{:02x}{:02x}{:02x}".format(*rgb)
    assert parse_hex_color(text) == rgb
    assert parse_hex_color(text.upper()) == rgb
    assert parse_hex_color(text + "80") == rgb


def test_short_hex_color_expands_digits():
    assert parse_hex_color("#fff") == (255, 255, 255)
    assert parse_hex_color("#fffa") == parse_hex_color("#ffffff")


@pytest.mark.parametrize("text", ["fab387", "#12345", "#ggg", "", 123])
def test_invalid_hex_color(text):
    with pytest.raises(ConfigError):
        parse_hex_color(text)


def test_config_path_under_home(tmp_path):
    assert config_path(tmp_path) == tmp_path / ".config" / "shellbar.yml"


def test_config_path_uses_home_variable(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert config_path() == tmp_path / ".config" / "shellbar.yml"


def test_config_path_without_home(monkeypatch):
    monkeypatch.delenv("HOME", raising=False)
    with pytest.raises(ConfigError):
        config_path()


def test_read_missing_file_gives_defaults(tmp_path):
    assert read_config(tmp_path / "absent.yml") == Config()


def test_read_existing_file(tmp_path):
    path = tmp_path / "bar.yml"
    path.write_text("position: Bottom\n", encoding="utf-8")
    assert read_config(path).position is Position.BOTTOM


def test_read_invalid_file_raises(tmp_path):
    path = tmp_path / "bar.yml"
    path.write_text("position: Sideways\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        read_config(path)


def test_watch_reports_modification_deletion_and_creation(tmp_path):
    path = tmp_path / "bar.yml"
    path.write_text("position: Top\n", encoding="utf-8")
    changes = watch_config(path, 0.01, 0.0)

    path.write_text("position: Bottom\n", encoding="utf-8")
    assert next(changes).position is Position.BOTTOM

    path.unlink()
    assert next(changes) == Config()

    path.write_text("logLevel: debug\n", encoding="utf-8")
    assert next(changes).log_level == "debug"


@pytest.mark.parametrize(
    ("spec", "level"),
    [
        ("warn", logging.WARNING),
        ("INFO", logging.INFO),
        ("error", logging.ERROR),
        ("debug, net=trace", logging.DEBUG),
        ("net=debug", log_level_from_spec("off")),
    ],
)
def test_log_level_from_spec(spec, level):
    assert log_level_from_spec(spec) == level


def test_trace_is_below_debug():
    assert log_level_from_spec("trace") < logging.DEBUG
    assert log_level_from_spec("off") > logging.CRITICAL


@pytest.mark.parametrize("spec", ["net=loud", "bad name=info", "=info", "what-ever"])
def test_invalid_log_spec(spec):
    with pytest.raises(ConfigError):
        log_level_from_spec(spec)