"""Glyphs of the symbol font used for the bar's icons."""

from __future__ import annotations

from enum import Enum

ICON_FONT = "Symbols Nerd Font"


class Icons(Enum):
    """Named icons; each maps to a glyph of the symbol font."""

    NONE = "None"
    APP_LAUNCHER = "AppLauncher"
    CLIPBOARD = "Clipboard"
    REFRESH = "Refresh"
    NO_UPDATES_AVAILABLE = "NoUpdatesAvailable"
    UPDATES_AVAILABLE = "UpdatesAvailable"
    MENU_CLOSED = "MenuClosed"
    MENU_OPEN = "MenuOpen"
    CPU = "Cpu"
    MEM = "Mem"
    TEMP = "Temp"
    SPEAKER0 = "Speaker0"
    SPEAKER1 = "Speaker1"
    SPEAKER2 = "Speaker2"
    SPEAKER3 = "Speaker3"
    HEADPHONES0 = "Headphones0"
    HEADPHONES1 = "Headphones1"
    HEADSET = "Headset"
    MIC0 = "Mic0"
    MIC1 = "Mic1"
    MONITOR_SPEAKER = "MonitorSpeaker"
    SCREEN_SHARE = "ScreenShare"
    BATTERY0 = "Battery0"
    BATTERY1 = "Battery1"
    BATTERY2 = "Battery2"
    BATTERY3 = "Battery3"
    BATTERY4 = "Battery4"
    BATTERY_CHARGING = "BatteryCharging"
    WIFI0 = "Wifi0"
    WIFI1 = "Wifi1"
    WIFI2 = "Wifi2"
    WIFI3 = "Wifi3"
    WIFI4 = "Wifi4"
    WIFI5 = "Wifi5"
    WIFI_LOCK1 = "WifiLock1"
    WIFI_LOCK2 = "WifiLock2"
    WIFI_LOCK3 = "WifiLock3"
    WIFI_LOCK4 = "WifiLock4"
    WIFI_LOCK5 = "WifiLock5"
    ETHERNET = "Ethernet"
    VPN = "Vpn"
    BLUETOOTH = "Bluetooth"
    POWER_SAVER = "PowerSaver"
    BALANCED = "Balanced"
    PERFORMANCE = "Performance"
    EYE_OPENED = "EyeOpened"
    EYE_CLOSED = "EyeClosed"
    LOCK = "Lock"
    POWER = "Power"
    REBOOT = "Reboot"
    SUSPEND = "Suspend"
    LOGOUT = "Logout"
    RIGHT_ARROW = "RightArrow"
    BRIGHTNESS = "Brightness"
    POINT = "Point"
    CLOSE = "Close"
    VERTICAL_DOTS = "VerticalDots"
    AIRPLANE = "Airplane"
    WEBCAM = "Webcam"
    SKIP_PREVIOUS = "SkipPrevious"
    PLAY_PAUSE = "PlayPause"
    SKIP_NEXT = "SkipNext"
    MUSIC_NOTE = "MusicNote"

    @property
    def glyph(self) -> str:
        return _GLYPHS[self]

    def __str__(self) -> str:
        return self.glyph


_GLYPHS: dict[Icons, str] = {
    Icons.NONE: "",
    Icons.APP_LAUNCHER: "󱗼",
    Icons.CLIPBOARD: "󰅌",
    Icons.REFRESH: "󰑐",
    Icons.NO_UPDATES_AVAILABLE: "󰗠",
    Icons.UPDATES_AVAILABLE: "󰳛",
    Icons.MENU_CLOSED: "",
    Icons.MENU_OPEN: "",
    Icons.CPU: "󰔂",
    Icons.MEM: "󰘚",
    Icons.TEMP: "󰔏",
    Icons.SPEAKER0: "󰸈",
    Icons.SPEAKER1: "󰕿",
    Icons.SPEAKER2: "󰖀",
    Icons.SPEAKER3: "󰕾",
    Icons.HEADPHONES0: "󰟎",
    Icons.HEADPHONES1: "󰋋",
    Icons.HEADSET: "󰋎",
    Icons.MIC0: "󰍭",
    Icons.MIC1: "󰍬",
    Icons.SCREEN_SHARE: "󱒃",
    Icons.MONITOR_SPEAKER: "󰽟",
    Icons.BATTERY0: "󰂃",
    Icons.BATTERY1: "󰁼",
    Icons.BATTERY2: "󰁾",
    Icons.BATTERY3: "󰂀",
    Icons.BATTERY4: "󰁹",
    Icons.BATTERY_CHARGING: "󰂄",
    Icons.WIFI0: "󰤭",
    Icons.WIFI1: "󰤯",
    Icons.WIFI2: "󰤟",
    Icons.WIFI3: "󰤢",
    Icons.WIFI4: "󰤥",
    Icons.WIFI5: "󰤨",
    Icons.WIFI_LOCK1: "󰤬",
    Icons.WIFI_LOCK2: "󰤡",
    Icons.WIFI_LOCK3: "󰤤",
    Icons.WIFI_LOCK4: "󰤧",
    Icons.WIFI_LOCK5: "󰤪",
    Icons.ETHERNET: "󰈀",
    Icons.VPN: "󰖂",
    Icons.BLUETOOTH: "󰂯",
    Icons.POWER_SAVER: "󰾆",
    Icons.BALANCED: "󰾅",
    Icons.PERFORMANCE: "󰓅",
    Icons.EYE_OPENED: "󰈈",
    Icons.EYE_CLOSED: "󰈉",
    Icons.LOCK: "󰌾",
    Icons.POWER: "󰐥",
    Icons.REBOOT: "󰑐",
    Icons.SUSPEND: "󰤄",
    Icons.LOGOUT: "󰗽",
    Icons.RIGHT_ARROW: "󰁔",
    Icons.BRIGHTNESS: "󰃠",
    Icons.POINT: "",
    Icons.CLOSE: "󰅖",
    Icons.VERTICAL_DOTS: "󰇙",
    Icons.AIRPLANE: "󰀝",
    Icons.WEBCAM: "",
    Icons.SKIP_PREVIOUS: "󰒮",
    Icons.PLAY_PAUSE: "󰐎",
    Icons.SKIP_NEXT: "󰒭",
    Icons.MUSIC_NOTE: "󰎇",
}


def icon(kind: Icons) -> str:
    """Return the glyph for an icon, to be drawn with ``ICON_FONT``."""
    if not isinstance(kind, Icons):
        raise TypeError(f"expected an Icons member, got {kind!r}")
    return _GLYPHS[kind]