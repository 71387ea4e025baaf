"""User interfaces: groups of widgets shown, hidden and removed together."""

from __future__ import annotations

from typing import Callable, TypeVar

from .timer import TimerHandler
from .widgets import UIPattern, Vec2, Widget

W = TypeVar("W", bound=Widget)


class UserInterface(TimerHandler):
    """Holds widgets on a screen-sized root canvas, plus any attached interfaces."""

    def __init__(self, width: float, height: float) -> None:
        super().__init__()
        self.root_canvas = Widget()
        self.root_canvas.size = Vec2(width, height)
        self.root_canvas.position = Vec2(width * 0.5, height * 0.5)
        self._widgets: dict[Widget, None] = {}
        self._interfaces: dict[UserInterface, None] = {}
        self.removed = False
        self.on_added_to_viewport: list[Callable[[], object]] = []
        self.on_hid_from_viewport: list[Callable[[], object]] = []
        self.on_removed_from_viewport: list[Callable[[], object]] = []

    @property
    def widgets(self) -> tuple[Widget, ...]:
        return tuple(self._widgets)

    @property
    def interfaces(self) -> tuple[UserInterface, ...]:
        return tuple(self._interfaces)

    def add_widget(self, widget_class: type[W]) -> W:
        """Create a widget of ``widget_class`` and keep it in this interface."""
        if not (isinstance(widget_class, type) and issubclass(widget_class, Widget)):
            raise TypeError(f"{widget_class!r} is not a widget class")
        widget = widget_class()
        self._widgets[widget] = None
        return widget

    def update(self, delta_time: float) -> None:
        for widget in self._widgets:
            if widget.ui_pattern is not UIPattern.NONE:
                widget.update()

    def add_to_viewport(self) -> None:
        for callback in self.on_added_to_viewport:
            callback()
        for widget in self._widgets:
            widget.set_ui_pattern(UIPattern.VISIBLE_AND_INTERACTIVE)
        for ui in self._interfaces:
            ui.add_to_viewport()

    def hide_from_viewport(self) -> None:
        for callback in self.on_hid_from_viewport:
            callback()
        for widget in self._widgets:
            widget.set_ui_pattern(UIPattern.NONE)
        for ui in self._interfaces:
            ui.hide_from_viewport()

    def remove_from_viewport(self) -> None:
        """Remove this interface and its attached ones; later calls do nothing."""
        if self.removed:
            return
        for callback in self.on_removed_from_viewport:
            callback()
        self.removed = True
        for ui in self._interfaces:
            ui.remove_from_viewport()
        self.close()

    def attach_to(self, other: UserInterface) -> None:
        other._interfaces[self] = None

    def detach_from(self, other: UserInterface) -> None:
        other._interfaces.pop(self, None)