import pytest

from silkengine.timer import Timer, TimerManager
from silkengine.ui import UserInterface
from silkengine.widgets import HorizontalPanel, UIPattern, Vec2, Widget


def test_root_canvas_fills_the_screen():
    ui = UserInterface(800, 600)
    assert ui.root_canvas.size == (800, 600)
    assert ui.root_canvas.position == (800 / 2, 600 / 2)


def test_add_widget_creates_and_keeps_it():
    ui = UserInterface(100, 100)
    widget = ui.add_widget(Widget)
    assert ui.widgets == (widget,)
    with pytest.raises(TypeError):
        ui.add_widget(str)


def test_add_to_viewport_shows_widgets_and_attached_interfaces():
    ui, child = UserInterface(100, 100), UserInterface(100, 100)
    child.attach_to(ui)
    calls = []
    ui.on_added_to_viewport.append(lambda: calls.append("added"))
    widget = ui.add_widget(Widget)
    inner = child.add_widget(Widget)
    ui.add_to_viewport()
    assert calls == ["added"]
    assert widget.ui_pattern is UIPattern.VISIBLE_AND_INTERACTIVE
    assert inner.ui_pattern is UIPattern.VISIBLE_AND_INTERACTIVE


def test_hide_from_viewport_hides_widgets():
    ui = UserInterface(100, 100)
    widget = ui.add_widget(Widget)
    ui.add_to_viewport()
    ui.hide_from_viewport()
    assert widget.ui_pattern is UIPattern.NONE


def test_detached_interface_no_longer_follows():
    ui, child = UserInterface(100, 100), UserInterface(100, 100)
    child.attach_to(ui)
    child.detach_from(ui)
    inner = child.add_widget(Widget)
    ui.add_to_viewport()
    assert inner.ui_pattern is UIPattern.NONE


def test_remove_happens_once_and_reaches_children():
    ui, child = UserInterface(100, 100), UserInterface(100, 100)
    child.attach_to(ui)
    calls = []
    ui.on_removed_from_viewport.append(lambda: calls.append(1))
    ui.remove_from_viewport()
    ui.remove_from_viewport()
    assert calls == [1]
    assert child.removed is True


def test_remove_closes_owned_timers():
    manager = TimerManager(clock=lambda: 0.0)
    timer = Timer(manager)
    timer.bind(1.0, lambda: None)
    ui = UserInterface(100, 100)
    ui.add_timer(timer)
    assert timer in manager
    ui.remove_from_viewport()
    assert timer not in manager


def test_update_only_touches_visible_widgets():
    ui = UserInterface(100, 100)
    shown = ui.add_widget(Widget)
    shown.size = Vec2(10, 10)
    shown.position = Vec2(100, 100)
    ui.add_to_viewport()
    hidden = ui.add_widget(Widget)
    ui.update(0.016)
    assert shown.zone == ((0, 0), (0, 0))
    assert hidden.zone is None


def test_panel_holds_interface_through_its_root_canvas():
    panel = HorizontalPanel()
    panel.set_unit_size((50, 50))
    ui = UserInterface(100, 100)
    panel.add_member(ui)
    assert ui.root_canvas.parent is panel
    assert ui.root_canvas.get_size() == (50, 50)
    panel.close()
    assert ui.removed is True
    panel.remove_member(ui)
    assert ui.root_canvas.parent is None
    assert panel.members_ui == []


def test_interface_index_is_clamped_to_the_end():
    panel = HorizontalPanel()
    panel.set_unit_size((50, 50))
    panel.add_member(Widget())
    ui = UserInterface(100, 100)
    panel.add_member(ui, 99)
    assert panel.members[-1] is ui.root_canvas