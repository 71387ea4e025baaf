"""Multi-line text with inline colour codes, measured and laid out on a character grid."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

BLACK = 0x000000
WHITE = 0xFFFFFF

# Colours are 0xRRGGBB.
TEXT_COLORS: dict[str, int] = {
    "$0": WHITE,
    "$1": 0xF5F5F5,
    "$2": 0xAAAAAA,
    "$3": 0x555555,
    "$4": BLACK,
    "$5": 0x00AA00,
    "$6": 0x55FF55,
    "$7": 0xFFFF55,
    "$8": 0xFFA500,
    "$9": 0xFF5555,
    "$a": 0xAA0000,
    "$b": 0xFF55FF,
    "$c": 0xAA00AA,
    "$d": 0x9400D3,
    "$e": 0x0000AA,
    "$f": 0x5555FF,
    "$g": 0x55FFFF,
    "$h": 0x00AAAA,
    "$i": 0xAA5500,
}

DEFAULT_FONT = "楷体"


class CharactersPattern(Enum):
    """Horizontal alignment of each line within the text block."""

    LEFT = 0
    MIDDLE = 1
    RIGHT = 2


@dataclass(frozen=True)
class TextRun:
    """One line of text to draw at (x, y) in the given colour."""

    x: int
    y: int
    text: str
    color: int


def _trunc_div(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


class Characters:
    """Text whose size is measured in cells of 3*size by 6*size pixels.

    ``$`` followed by a code from TEXT_COLORS switches the drawing colour.
    """

    def __init__(self) -> None:
        self.rows = 1
        self.columns = 0
        self.text = ""
        self.size = 3
        self.font = DEFAULT_FONT

    def set_characters(self, text: str, size: int = 3, font: str = DEFAULT_FONT) -> None:
        """Set the text and measure its rows and widest line."""
        rows, widest, current = 1, 0, 0
        i = 0
        while i < len(text):
            char = text[i]
            if char == "\n":
                rows += 1
                widest = max(widest, current)
                current = 0
            elif char == "$" and i + 1 < len(text):
                if "$" + text[i + 1] in TEXT_COLORS:
                    i += 1
                else:
                    current -= 1
            else:
                current += 1
            i += 1
        self.rows = rows
        self.columns = max(widest, current)
        self.text = text
        self.size = size
        self.font = font

    def width(self) -> int:
        return self.columns * self.size * 3

    def height(self) -> int:
        return self.rows * self.size * 6

    def layout(
        self, x: float, y: float, pattern: CharactersPattern = CharactersPattern.MIDDLE
    ) -> list[TextRun]:
        """Return the lines to draw with the block's top-left corner at (x, y).

        Each line takes the colour in force when its end is reached.
        """
        factor = pattern.value
        char_w = 3 * self.size
        line_h = 6 * self.size
        width = self.width()
        runs: list[TextRun] = []
        color = BLACK
        line: list[str] = []

        def flush(row: int) -> None:
            offset = _trunc_div((width - len(line) * char_w) * factor, 2)
            runs.append(TextRun(int(x) + offset, int(y) + row * line_h, "".join(line), color))

        text = self.text
        i = 0
        while i < len(text):
            char = text[i]
            if char == "\n":
                flush(len(runs))
                line.clear()
            elif char == "$" and i + 1 < len(text):
                i += 1
                code = "$" + text[i]
                if code in TEXT_COLORS:
                    color = TEXT_COLORS[code]
                else:
                    line.append(text[i])
            else:
                line.append(char)
            i += 1
        flush(len(runs))
        return runs