"""Basic UI widgets: placement in a parent hierarchy, and panels that arrange members."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Iterable, NamedTuple

ZONE_CELL = 200
ZONE_COLUMNS = 6
ZONE_ROWS = 4


class Vec2(NamedTuple):
    """A 2D vector that compares equal to a plain ``(x, y)`` tuple."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Iterable[float]) -> Vec2:  # type: ignore[override]
        ox, oy = other
        return Vec2(self.x + ox, self.y + oy)

    def __sub__(self, other: Iterable[float]) -> Vec2:
        ox, oy = other
        return Vec2(self.x - ox, self.y - oy)

    def __mul__(self, other: Any) -> Vec2:  # type: ignore[override]
        if isinstance(other, (int, float)):
            return Vec2(self.x * other, self.y * other)
        ox, oy = other
        return Vec2(self.x * ox, self.y * oy)

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> Vec2:
        if isinstance(other, (int, float)):
            return Vec2(self.x / other, self.y / other)
        ox, oy = other
        return Vec2(self.x / ox, self.y / oy)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)


class LayoutPattern(Enum):
    """Which point of the parent a widget's position is measured from."""

    LEFT_TOP = 0
    MIDDLE_TOP = 1
    RIGHT_TOP = 2
    LEFT_MIDDLE = 3
    CENTER = 4
    RIGHT_MIDDLE = 5
    LEFT_BOTTOM = 6
    MIDDLE_BOTTOM = 7
    RIGHT_BOTTOM = 8


class UIPattern(Enum):
    """Whether a widget is shown, and whether it reacts to the mouse."""

    NONE = 0
    VISIBLE_ONLY = 1
    VISIBLE_AND_INTERACTIVE = 2


_LAYOUT_FACTORS: dict[LayoutPattern, tuple[float, float]] = {
    LayoutPattern.LEFT_TOP: (-0.5, -0.5),
    LayoutPattern.MIDDLE_TOP: (0.0, -0.5),
    LayoutPattern.RIGHT_TOP: (0.5, -0.5),
    LayoutPattern.LEFT_MIDDLE: (-0.5, 0.0),
    LayoutPattern.CENTER: (0.0, 0.0),
    LayoutPattern.RIGHT_MIDDLE: (0.5, 0.0),
    LayoutPattern.LEFT_BOTTOM: (-0.5, 0.5),
    LayoutPattern.MIDDLE_BOTTOM: (0.0, 0.5),
    LayoutPattern.RIGHT_BOTTOM: (0.5, 0.5),
}


def _zone_cell(value: float, limit: int) -> int:
    return max(0, min(int(int(value) / ZONE_CELL), limit - 1))


class Widget:
    """A rectangle placed relative to its parent, with position, rotation and scale."""

    def __init__(self) -> None:
        self.position = Vec2(0.0, 0.0)
        self.rotation = 0.0
        self.scale = Vec2(1.0, 1.0)
        self.size = Vec2(0.0, 0.0)
        self.layer = 0
        self.parent: Widget | None = None
        self._children: dict[Widget, None] = {}
        self.attached_panel: Panel | None = None
        self.layout_pattern = LayoutPattern.LEFT_TOP
        self.ui_pattern = UIPattern.NONE
        self.zone: tuple[tuple[int, int], tuple[int, int]] | None = None

    @property
    def children(self) -> tuple[Widget, ...]:
        return tuple(self._children)

    def attach_to(self, parent: Widget | None) -> None:
        if parent is not None:
            parent._children[self] = None
            self.parent = parent

    def detach_from(self, parent: Widget | None) -> None:
        if parent is not None:
            parent._children.pop(self, None)
            self.parent = None

    def set_ui_pattern(self, pattern: UIPattern) -> None:
        """Set the visibility of this widget and all its descendants."""
        if self.ui_pattern is pattern:
            return
        self.ui_pattern = pattern
        for child in self._children:
            child.set_ui_pattern(pattern)
        if pattern is not UIPattern.VISIBLE_AND_INTERACTIVE:
            self.zone = None

    def layout_offset(self) -> Vec2:
        """Offset of the layout anchor point from the parent's centre."""
        if self.parent is None:
            return Vec2(0.0, 0.0)
        fx, fy = _LAYOUT_FACTORS[self.layout_pattern]
        parent_size = self.parent.get_size()
        return Vec2(fx * parent_size.x, fy * parent_size.y)

    def get_size(self) -> Vec2:
        return Vec2(*self.size) * self.screen_scale()

    def screen_position(self) -> Vec2:
        if self.parent is None:
            return Vec2(*self.position)
        return self.parent.screen_position() + self.position + self.layout_offset()

    def screen_rotation(self) -> float:
        if self.parent is None:
            return self.rotation
        return self.parent.screen_rotation() + self.rotation

    def screen_scale(self) -> Vec2:
        if self.parent is None:
            return Vec2(*self.scale)
        return self.parent.screen_scale() * self.scale

    def update(self) -> None:
        """Recompute the screen cells this widget covers, when it is interactive."""
        if self.ui_pattern is not UIPattern.VISIBLE_AND_INTERACTIVE:
            return
        pos = self.screen_position() - self.get_size() / 2
        first = (_zone_cell(pos.x, ZONE_COLUMNS), _zone_cell(pos.y, ZONE_ROWS))
        pos = pos + self.size
        last = (_zone_cell(pos.x, ZONE_COLUMNS), _zone_cell(pos.y, ZONE_ROWS))
        self.zone = (first, last)

    def contains(self, point: Iterable[float]) -> bool:
        """Whether a screen point lies within the widget's box, centred on its position."""
        px, py = point
        centre = self.screen_position()
        half = self.get_size() / 2
        return (centre.x - half.x <= px <= centre.x + half.x
                and centre.y - half.y <= py <= centre.y + half.y)


class Panel(Widget, ABC):
    """A widget that lays out member widgets (or user interfaces) in unit-sized slots."""

    def __init__(self) -> None:
        super().__init__()
        self.members: list[Widget] = []
        self.members_ui: list[Any] = []
        self.unit_size = Vec2(0.0, 0.0)

    @abstractmethod
    def _adjust_member_position(self, member: Widget, index: int) -> None:
        """Place the member that sits at ``index``."""

    @abstractmethod
    def get_size(self) -> Vec2:
        """Size of the panel as laid out."""

    def update(self) -> None:
        super().update()
        for index, member in enumerate(self.members):
            self._adjust_member_position(member, index)

    def set_unit_size(self, size: Iterable[float]) -> None:
        self.unit_size = Vec2(*size)
        Panel.update(self)

    def add_member(self, member: Any, index: int = -1) -> None:
        """Add a widget, or a user interface's root canvas, at ``index`` (-1 appends)."""
        canvas = getattr(member, "root_canvas", None)
        is_ui = canvas is not None
        widget = canvas if is_ui else member
        if not isinstance(widget, Widget):
            raise TypeError(f"cannot add {type(member).__name__} to a panel")
        widget.attach_to(self)
        if is_ui:
            index = max(-1, min(index, len(self.members)))
        if index >= 0:
            self.members.insert(index, widget)
        else:
            self.members.append(widget)
        if is_ui:
            self.members_ui.append(member)
        widget.attached_panel = self
        self._fit_to_unit(widget)
        self._adjust_member_position(widget, index if index >= 0 else len(self.members) - 1)

    def remove_member(self, member: Any) -> None:
        canvas = getattr(member, "root_canvas", None)
        widget = canvas if canvas is not None else member
        widget.detach_from(self)
        self.members = [m for m in self.members if m is not widget]
        self.members_ui = [m for m in self.members_ui if m is not member]
        widget.attached_panel = None

    def close(self) -> None:
        """Remove every user interface held by this panel from the viewport."""
        for ui in self.members_ui:
            ui.remove_from_viewport()

    def _fit_to_unit(self, member: Widget) -> None:
        # A zero-sized dimension cannot be scaled to the unit and keeps its scale.
        current = member.get_size()
        scale = member.scale
        member.scale = Vec2(
            self.unit_size.x / current.x if current.x else scale.x,
            self.unit_size.y / current.y if current.y else scale.y,
        )


class HorizontalPanel(Panel):
    """Lays members out left to right."""

    def __init__(self) -> None:
        super().__init__()
        self.spacing = 0.0

    def _adjust_member_position(self, member: Widget, index: int) -> None:
        if index < 0:
            return
        unit = self.unit_size
        member.position = Vec2(index * (unit.x + self.spacing), 0.0) + unit * 0.5

    def get_size(self) -> Vec2:
        if not self.members:
            return Vec2()
        unit = self.unit_size
        return Vec2(len(self.members) * (unit.x + self.spacing) - self.spacing, unit.y)


class VerticalPanel(Panel):
    """Lays members out top to bottom."""

    def __init__(self) -> None:
        super().__init__()
        self.spacing = 0.0

    def _adjust_member_position(self, member: Widget, index: int) -> None:
        if index < 0:
            return
        member.position = Vec2(0.0, index * (self.unit_size.y + self.spacing))

    def get_size(self) -> Vec2:
        if not self.members:
            return Vec2()
        unit = self.unit_size
        return Vec2(unit.x, len(self.members) * (unit.y + self.spacing) - self.spacing)


class GridPanel(Panel):
    """Lays members out row by row in a grid of ``column`` columns."""

    def __init__(self) -> None:
        super().__init__()
        self.row = 1
        self.column = 1
        self.spacing_x = 0.0
        self.spacing_y = 0.0

    def _adjust_member_position(self, member: Widget, index: int) -> None:
        if index < 0:
            return
        if self.column <= 0:
            raise ValueError("a grid panel needs at least one column")
        row, column = divmod(index, self.column)
        unit = self.unit_size
        member.position = Vec2(column * (unit.x + self.spacing_x), row * (unit.y + self.spacing_y))

    def get_size(self) -> Vec2:
        if not self.members:
            return Vec2()
        unit = self.unit_size
        return Vec2(
            self.column * (unit.x + self.spacing_x) - self.spacing_x,
            self.row * (unit.y + self.spacing_y) - self.spacing_y,
        )