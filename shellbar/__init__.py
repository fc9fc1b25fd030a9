"""Configuration, icons, centred layout and popup-menu logic for a desktop status bar."""

__version__ = "0.1.0"
__all__ = ["centerbox", "config", "icons", "menu"]