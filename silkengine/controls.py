"""Text, progress bar and radial sector widgets."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Callable

from .imaging import Image, normalize_degree, sector_image
from .text import DEFAULT_FONT, Characters, CharactersPattern, TextRun
from .widgets import UIPattern, Vec2, Widget

if TYPE_CHECKING:
    from .resources import ResourceManager


def _fetch(resources: ResourceManager, name: str) -> Image:
    image = resources.fetch(name)
    if image is None:
        raise KeyError(f"no image named {name!r}")
    return image


class BarDirection(Enum):
    """Which way a bar's filled part grows."""

    RIGHT_TO_LEFT = 0
    LEFT_TO_RIGHT = 1
    TOP_TO_BOTTOM = 2
    BOTTOM_TO_TOP = 3


class Text(Widget):
    """A widget showing text, optionally read from a source on every update."""

    def __init__(self) -> None:
        super().__init__()
        self.characters = Characters()
        self.pattern = CharactersPattern.MIDDLE
        self._source: Callable[[], str] | None = None

    def set_text(self, text: str, size: int = 3, font: str = DEFAULT_FONT) -> None:
        self.characters.set_characters(text, size, font)

    def bind_text(self, source: Callable[[], str] | None) -> None:
        """Read the text from ``source`` at each update (None unbinds)."""
        self._source = source

    def update(self) -> None:
        super().update()
        if self._source is not None:
            self.characters.set_characters(self._source())
        self.size = Vec2(float(self.characters.width()), float(self.characters.height()))

    def render(self) -> list[TextRun]:
        """Lines to draw, centred on the widget; nothing when hidden."""
        if self.ui_pattern is UIPattern.NONE:
            return []
        corner = self.screen_position() - Vec2(*self.size) * 0.5
        return self.characters.layout(corner.x, corner.y, self.pattern)


class Bar(Widget):
    """A progress bar with a back image, a partly drawn front image and a handle."""

    def __init__(self) -> None:
        super().__init__()
        self.percentage = 0.0
        self.direction = BarDirection.RIGHT_TO_LEFT
        self.front: Image | None = None
        self.back: Image | None = None
        self.button: Image | None = None
        self.front_size = (0, 0)
        self.back_size = (0, 0)
        self.button_size = (0, 0)

    def set_percentage(self, percentage: float) -> None:
        self.percentage = max(0.0, min(float(percentage), 1.0))

    def front_region(self) -> tuple[tuple[int, int], tuple[int, int]]:
        """Start and end corners of the filled part of the front image."""
        fx, fy = self.front_size
        p = self.percentage
        if self.direction is BarDirection.RIGHT_TO_LEFT:
            return (0, 0), (int(fx * p), fy)
        if self.direction is BarDirection.LEFT_TO_RIGHT:
            return (int(fx * (1.0 - p)), 0), (fx, fy)
        if self.direction is BarDirection.TOP_TO_BOTTOM:
            return (0, int(fy * (1.0 - p))), (fx, fy)
        return (0, 0), (fx, int(fy * p))

    def load_front_picture(self, resources: ResourceManager, name: str) -> None:
        self.front = _fetch(resources, name)
        self.front_size = (self.front.width, self.front.height)

    def load_back_picture(self, resources: ResourceManager, name: str) -> None:
        self.back = _fetch(resources, name)
        self.back_size = (self.back.width, self.back.height)

    def load_button_picture(self, resources: ResourceManager, name: str) -> None:
        self.button = _fetch(resources, name)
        self.button_size = (self.button.width, self.button.height)


class Sector(Widget):
    """A radial gauge showing a pie slice of its front image."""

    def __init__(self) -> None:
        super().__init__()
        self.percentage = 0.0
        self.start_degree = 90.0
        self.front: Image | None = None
        self.back: Image | None = None
        self.front_size = (0, 0)
        self.back_size = (0, 0)

    def set_percentage(self, percentage: float) -> None:
        self.percentage = max(0.0, min(float(percentage), 1.0))

    def set_start_degree(self, start: float) -> None:
        self.start_degree = normalize_degree(start)

    def front_image(self, image: Image | None = None) -> Image:
        """The part of the front image (or ``image``) covered by the current percentage."""
        source = image if image is not None else self.front
        if source is None:
            raise ValueError("no front image to cut")
        return sector_image(source, self.start_degree, self.start_degree + 360 * self.percentage)

    def load_front_picture(self, resources: ResourceManager, name: str) -> None:
        self.front = _fetch(resources, name)
        self.front_size = (self.front.width, self.front.height)

    def load_back_picture(self, resources: ResourceManager, name: str) -> None:
        self.back = _fetch(resources, name)
        self.back_size = (self.back.width, self.back.height)