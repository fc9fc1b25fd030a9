"""Popup menu state for a bar surface and where the popup is placed."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from shellbar.centerbox import Alignment
from shellbar.config import Position

_EDGE_MARGIN = 8.0


class MenuKind(Enum):
    UPDATES = "Updates"
    SETTINGS = "Settings"
    TRAY = "Tray"
    MEDIA_PLAYER = "MediaPlayer"


@dataclass(frozen=True)
class MenuType:
    """A kind of menu; tray menus also carry the tray item's name."""

    kind: MenuKind
    name: str | None = None

    def __post_init__(self) -> None:
        if (self.kind is MenuKind.TRAY) != (self.name is not None):
            raise ValueError("only tray menus carry a name, and they must")

    @classmethod
    def tray(cls, name: str) -> MenuType:
        return cls(MenuKind.TRAY, name)


@dataclass(frozen=True)
class ButtonUIRef:
    """Where the button that opened a menu sits, and the size of its viewport."""

    position: tuple[float, float]
    viewport: tuple[float, float]


class Layer(Enum):
    BACKGROUND = "background"
    BOTTOM = "bottom"
    TOP = "top"
    OVERLAY = "overlay"


class KeyboardInteractivity(Enum):
    NONE = "none"
    EXCLUSIVE = "exclusive"
    ON_DEMAND = "on_demand"


@dataclass(frozen=True)
class SurfaceCommand:
    """A request to change a layer surface's layer or keyboard interactivity."""

    surface_id: int
    setting: Layer | KeyboardInteractivity


class MenuSize(Enum):
    NORMAL = 250.0
    LARGE = 350.0


@dataclass
class Menu:
    """The menu surface of one output and the menu open on it, if any."""

    id: int
    menu_info: tuple[MenuType, ButtonUIRef] | None = None

    def open(self, menu_type: MenuType, button_ui_ref: ButtonUIRef) -> list[SurfaceCommand]:
        self.menu_info = (menu_type, button_ui_ref)
        return [
            SurfaceCommand(self.id, Layer.OVERLAY),
            SurfaceCommand(self.id, KeyboardInteractivity.NONE),
        ]

    def close(self) -> list[SurfaceCommand]:
        if self.menu_info is None:
            return []
        self.menu_info = None
        return [
            SurfaceCommand(self.id, Layer.BACKGROUND),
            SurfaceCommand(self.id, KeyboardInteractivity.NONE),
        ]

    def toggle(self, menu_type: MenuType, button_ui_ref: ButtonUIRef) -> list[SurfaceCommand]:
        """Open the menu, close it if it is already shown, or switch to another one."""
        if self.menu_info is None:
            return self.open(menu_type, button_ui_ref)
        if self.menu_info[0] == menu_type:
            return self.close()
        self.menu_info = (menu_type, button_ui_ref)
        return []

    def close_if(self, menu_type: MenuType) -> list[SurfaceCommand]:
        if self.menu_info is not None and self.menu_info[0] == menu_type:
            return self.close()
        return []

    def request_keyboard(self) -> list[SurfaceCommand]:
        return [SurfaceCommand(self.id, KeyboardInteractivity.ON_DEMAND)]

    def release_keyboard(self) -> list[SurfaceCommand]:
        return [SurfaceCommand(self.id, KeyboardInteractivity.NONE)]


def menu_left_padding(menu_size: MenuSize, button_ui_ref: ButtonUIRef) -> float:
    """Left offset that centres the popup under its button while keeping it on screen."""
    size = menu_size.value
    centred = max(button_ui_ref.position[0] - size / 2.0, _EDGE_MARGIN)
    return min(centred, button_ui_ref.viewport[0] - size - _EDGE_MARGIN)


def menu_vertical_alignment(position: Position) -> Alignment:
    """Popups hang from the edge of the screen the bar is on."""
    return Alignment.START if position is Position.TOP else Alignment.END