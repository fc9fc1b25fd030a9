# shellbar

shellbar holds the core logic of a desktop status bar. It does not depend on any GUI toolkit. It has four modules:

- **`shellbar.config`** reads and validates the YAML configuration. It fills in a default for every setting it covers: log level, bar position, target outputs, module layout, system thresholds, clock format, settings commands, media player options and the appearance palette. It can also poll the file for changes.
- **`shellbar.icons`** lists the symbol-font glyphs the bar uses.
- **`shellbar.centerbox`** is a three-slot horizontal layout. It keeps the middle child centred whenever the edge children leave room for it.
- **`shellbar.menu`** tracks which popup menu is open on a surface and lists the layer-surface commands that each change needs. It also works out where the popup is placed.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Configuration

The configuration file is `~/.config/shellbar.yml`. Its keys are camelCase.

```python
from shellbar.config import config_path, read_config, load_config

config = read_config()          # reads config_path(); defaults if the file cannot be opened
print(config.position, config.clock.format)

config = load_config("""
position: Bottom
outputs:
  Targets: [DP-1]
truncateTitleAfterLength: 80
modules:
  left: [Workspaces]
  right: [[Clock, Privacy, Settings]]
system:
  cpuWarnThreshold: 50
appearance:
  primaryColor: "#fab387"
  backgroundColor:
    base: "#1e1e2e"
    weak: "#313244"
""")
```

Some notes on the values:

- `outputs` is `All`, `Active`, or a mapping `{Targets: [...]}` that holds a non-empty list of output names.
- `position` is `Top` or `Bottom`.
- Each entry of a module section is either a module name such as `Clock` or `WindowTitle`, or a list of names that form a group.
- A color is either a hex string (`#RGB`, `#RGBA`, `#RRGGBB` or `#RRGGBBAA`) or a mapping. The mapping needs `base` and may also give `strong`, `weak` and `text`.

If the YAML is invalid, or a value has the wrong type, is out of range or is an unknown variant, `load_config`, `read_config` and `Config.from_dict` raise `ConfigError`.

`AppearanceColor` has these methods:

- `get_base()` returns a `Color` with channels in the range 0..1.
- `get_text()` returns the text color.
- `get_weak_pair(fallback)` and `get_strong_pair(fallback)` each return a `Pair` of background and text color. If that variant is not set they return `None`.

`log_level_from_spec("info, net=debug")` checks a log spec and returns its default `logging` level. It returns `config.OFF` when no default is given.

### Watching for changes

`watch_config(path, poll_interval=1.0, debounce=0.5)` returns a generator that yields a new `Config` whenever the file changes:

- It checks the file every `poll_interval` seconds.
- When the file is created or modified, it yields the newly read configuration. After a modification it first waits `debounce` seconds.
- When the file is deleted, it yields the defaults.
- If the file fails to parse, it logs a warning and yields nothing for that change.

## Icons

```python
from shellbar.icons import ICON_FONT, Icons, icon

glyph = icon(Icons.CPU)          # also Icons.CPU.glyph or str(Icons.CPU)
```

Draw the glyphs with the font named by `ICON_FONT`.

## Layout

```python
from shellbar.centerbox import Centerbox, FixedChild, Length, LengthKind, Limits, Padding, Size, Alignment

box = Centerbox(
    [FixedChild(Size(100, 20)), FixedChild(Size(200, 20)), FixedChild(Size(80, 20))],
    spacing=4,
    padding=Padding(4, 4, 4, 4),
    width=Length(LengthKind.FILL),
    height=Length(LengthKind.FIXED, 34),
    align_items=Alignment.CENTER,
)
root = box.layout(Limits(Size(), Size(1920, 34)))
for child in root.children:
    print(child.x, child.y, child.size)
```

A child can be any object that has a `height` (a `Length`) and a `layout(limits)` method returning a `Node`. The edge children are laid out first and the centre child last. If `Centerbox` is not given exactly three children, it raises `ValueError`.

## Menus

```python
from shellbar.menu import ButtonUIRef, Menu, MenuKind, MenuSize, MenuType, menu_left_padding

menu = Menu(1)
button = ButtonUIRef(position=(400.0, 0.0), viewport=(1920.0, 34.0))
commands = menu.toggle(MenuType(MenuKind.SETTINGS), button)
offset = menu_left_padding(MenuSize.LARGE, button)
```

Every menu operation returns a list of `SurfaceCommand`s, which may be empty:

- `open` adds commands that raise the surface to the overlay layer.
- `close` adds commands that send the surface back to the background layer.
- `toggle` opens the menu, closes it if the same menu is already shown, or switches to another menu without issuing any commands.
- `close_if`, `request_keyboard` and `release_keyboard` are also available.

Tray menus are made with `MenuType.tray(name)`.

`menu_vertical_alignment(position)` tells whether a popup hangs from the top or the bottom edge.

## What this package does not do

shellbar has no window, renderer or command to start a bar. It does not talk to a compositor, and it has none of the bar's modules themselves: workspaces, tray, clock, audio, network and so on. It only provides the configuration, layout, icon and menu logic that such a program builds on. Sending the `SurfaceCommand`s it returns is left to the caller.