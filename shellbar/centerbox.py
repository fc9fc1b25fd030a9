"""Horizontal layout that keeps its middle child centred between two edge children."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol


class LengthKind(Enum):
    SHRINK = "shrink"
    FILL = "fill"
    FILL_PORTION = "fill_portion"
    FIXED = "fixed"


@dataclass(frozen=True)
class Length:
    """A sizing rule along one axis; ``value`` is the amount or the fill portion."""

    kind: LengthKind = LengthKind.SHRINK
    value: float = 0.0

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"length value must not be negative: {self.value}")
        if self.kind is LengthKind.FILL_PORTION and self.value != int(self.value):
            raise ValueError(f"fill portion must be a whole number: {self.value}")

    def fill_factor(self) -> int:
        """How strongly this length claims free space; zero for non-filling lengths."""
        if self.kind is LengthKind.FILL:
            return 1
        if self.kind is LengthKind.FILL_PORTION:
            return int(self.value)
        return 0


class Alignment(Enum):
    START = "start"
    CENTER = "center"
    END = "end"


@dataclass(frozen=True)
class Padding:
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    left: float = 0.0

    def horizontal(self) -> float:
        return self.left + self.right

    def vertical(self) -> float:
        return self.top + self.bottom


@dataclass(frozen=True)
class Size:
    width: float = 0.0
    height: float = 0.0

    def expand(self, padding: Padding) -> Size:
        """Grow by the padding on every side."""
        return Size(self.width + padding.horizontal(), self.height + padding.vertical())


@dataclass(frozen=True)
class Limits:
    """Minimum and maximum size a layout may take."""

    min: Size = Size()
    max: Size = Size()

    def constrain_width(self, width: Length) -> Limits:
        if width.kind is not LengthKind.FIXED:
            return self
        new = max(min(width.value, self.max.width), self.min.width)
        return Limits(Size(new, self.min.height), Size(new, self.max.height))

    def constrain_height(self, height: Length) -> Limits:
        if height.kind is not LengthKind.FIXED:
            return self
        new = max(min(height.value, self.max.height), self.min.height)
        return Limits(Size(self.min.width, new), Size(self.max.width, new))

    def shrink(self, padding: Padding) -> Limits:
        """Remove the padding from both bounds, never going below zero."""
        dw, dh = padding.horizontal(), padding.vertical()
        return Limits(
            Size(max(self.min.width - dw, 0.0), max(self.min.height - dh, 0.0)),
            Size(max(self.max.width - dw, 0.0), max(self.max.height - dh, 0.0)),
        )

    def _resolve_axis(self, length: Length, intrinsic: float, low: float, high: float) -> float:
        if length.kind in (LengthKind.FILL, LengthKind.FILL_PORTION):
            return high
        if length.kind is LengthKind.FIXED:
            return max(min(length.value, high), low)
        return max(min(intrinsic, high), low)

    def resolve(self, width: Length, height: Length, intrinsic: Size) -> Size:
        """Pick the final size for the given lengths and intrinsic content size."""
        return Size(
            self._resolve_axis(width, intrinsic.width, self.min.width, self.max.width),
            self._resolve_axis(height, intrinsic.height, self.min.height, self.max.height),
        )


@dataclass
class Node:
    """A laid-out box: its size, its position and the boxes inside it."""

    size: Size = Size()
    x: float = 0.0
    y: float = 0.0
    children: list[Node] = field(default_factory=list)

    def move_to(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def align(self, horizontal: Alignment, vertical: Alignment, space: Size) -> None:
        """Shift the node within ``space`` according to the alignments."""
        if horizontal is Alignment.CENTER:
            self.x += (space.width - self.size.width) / 2.0
        elif horizontal is Alignment.END:
            self.x += space.width - self.size.width
        if vertical is Alignment.CENTER:
            self.y += (space.height - self.size.height) / 2.0
        elif vertical is Alignment.END:
            self.y += space.height - self.size.height


class _Child(Protocol):
    height: Length

    def layout(self, limits: Limits) -> Node: ...


@dataclass
class FixedChild:
    """A leaf with an intrinsic size and width and height rules."""

    intrinsic: Size
    width: Length = Length()
    height: Length = Length()

    def layout(self, limits: Limits) -> Node:
        return Node(limits.resolve(self.width, self.height, self.intrinsic))


@dataclass
class Centerbox:
    """Lays out exactly three children: start, centre and end."""

    children: Sequence[_Child]
    spacing: float = 0.0
    padding: Padding = Padding()
    width: Length = Length()
    height: Length = Length()
    align_items: Alignment = Alignment.START

    def __post_init__(self) -> None:
        self.children = tuple(self.children)
        if len(self.children) != 3:
            raise ValueError(f"a centerbox needs exactly 3 children, got {len(self.children)}")

    def layout(self, limits: Limits) -> Node:
        limits = (
            limits.constrain_width(self.width)
            .constrain_height(self.height)
            .shrink(self.padding)
        )
        total_spacing = self.spacing * 2
        max_width = limits.max.width
        max_cross = limits.max.height
        cross = 0.0 if self.height.kind is LengthKind.SHRINK else max_cross
        available = max_width - total_spacing
        remaining = 0.0 if self.width.kind is LengthKind.SHRINK else max(available, 0.0)

        nodes: dict[int, Node] = {}
        for index in (0, 2, 1):
            child = self.children[index]
            max_height = cross if child.height.fill_factor() != 0 else max_cross
            node = child.layout(Limits(Size(), Size(remaining, max_height)))
            remaining -= node.size.width
            cross = max(cross, node.size.height)
            nodes[index] = node

        start, center, end = nodes[0], nodes[1], nodes[2]
        space = Size(0.0, cross)

        start.move_to(self.padding.left, self.padding.top)
        start.align(Alignment.START, self.align_items, space)
        end.move_to(max_width, self.padding.top)
        end.align(Alignment.END, self.align_items, space)

        half_available = available / 2.0
        half_center = center.size.width / 2.0
        if (
            half_available - start.size.width < half_center
            or half_available - end.size.width < half_center
        ):
            x = (max_width - end.size.width - start.size.width) / 2.0 + start.size.width
        else:
            x = max_width / 2.0 + self.padding.horizontal() / 2.0
        center.move_to(x, self.padding.top)
        center.align(Alignment.CENTER, self.align_items, space)

        main = start.size.width + center.size.width + end.size.width + total_spacing
        size = limits.resolve(self.width, self.height, Size(main, cross))
        return Node(size.expand(self.padding), children=[start, center, end])