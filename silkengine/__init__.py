"""Building blocks for a small 2D side-scrolling game engine: collision tables, timers, levels, image processing, resources, text and UI widgets."""

__version__ = "0.1.0"

__all__ = [
    "collision",
    "timer",
    "files",
    "levels",
    "imaging",
    "resources",
    "sprites",
    "text",
    "widgets",
    "controls",
    "ui",
]