"""Pixel images and the image operations used for sprites and UI.

Pixels are 32-bit integers laid out as 0xAARRGGBB.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable

_ALPHA_MASK = 0xFF000000


def _rgb(pixel: int) -> tuple[int, int, int]:
    return (pixel >> 16) & 0xFF, (pixel >> 8) & 0xFF, pixel & 0xFF


def _pack(alpha_bits: int, r: int, g: int, b: int) -> int:
    return alpha_bits | (r << 16) | (g << 8) | b


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


@dataclass
class Image:
    """A width x height grid of ARGB pixels stored row by row."""

    width: int
    height: int
    pixels: list[int] | None = field(default=None)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("image dimensions must not be negative")
        if self.pixels is None:
            self.pixels = [0] * (self.width * self.height)
        else:
            self.pixels = list(self.pixels)
            if len(self.pixels) != self.width * self.height:
                raise ValueError(
                    f"expected {self.width * self.height} pixels, got {len(self.pixels)}"
                )

    def resize(self, width: int, height: int) -> None:
        """Change the size; the contents are cleared to transparent black."""
        if width < 0 or height < 0:
            raise ValueError("image dimensions must not be negative")
        self.width = width
        self.height = height
        self.pixels = [0] * (width * height)

    def rows(self) -> list[list[int]]:
        """Return the pixels as a list of rows."""
        w = self.width
        return [self.pixels[start:start + w] for start in range(0, w * self.height, w)]

    def copy(self) -> Image:
        return Image(self.width, self.height, list(self.pixels))

    @classmethod
    def from_rows(cls, rows: list[list[int]]) -> Image:
        height = len(rows)
        width = len(rows[0]) if rows else 0
        return cls(width, height, [pixel for row in rows for pixel in row])


@dataclass(frozen=True)
class FilterInfo:
    """A colour filter layer: colour (0xRRGGBB), strength and layer order."""

    color: int = 0x000000
    level: int = 50
    layer: int = 0


def normalize_degree(degree: float) -> float:
    """Bring an angle into the range [0, 360)."""
    result = math.fmod(degree, 360.0)
    if result < 0:
        result += 360.0
    return 0.0 if result >= 360.0 else result


def get_pixel(image: Image, row: int, column: int) -> int:
    """Return the pixel at (row, column), clamping both to the image."""
    column = _clamp(column, 0, image.width - 1)
    row = _clamp(row, 0, image.height - 1)
    return image.pixels[row * image.width + column]


def flip_image(src: Image, horizontal: bool = True) -> Image:
    """Mirror an image left-right, or top-bottom when ``horizontal`` is False."""
    rows = src.rows()
    if horizontal:
        return Image.from_rows([row[::-1] for row in rows]) if rows else src.copy()
    return Image.from_rows(rows[::-1]) if rows else src.copy()


def sector_image(src: Image, start: float, end: float) -> Image:
    """Keep only the pixels inside the angular sector from ``start`` to ``end``.

    Angles are in degrees, counter-clockwise from the right, measured about
    the image centre. Pixels outside the sector become 0.
    """
    dst = Image(src.width, src.height)
    if start == end:
        return dst
    start = normalize_degree(start)
    end = normalize_degree(end)
    center_x = src.width * 0.5
    center_y = src.height * 0.5
    for i, row in enumerate(src.rows()):
        y = i - center_y
        for j, pixel in enumerate(row):
            x = j - center_x
            theta = normalize_degree(math.degrees(math.atan2(-y, x)))
            if end <= start:
                if end <= theta < start:
                    continue
            elif theta <= start or theta > end:
                continue
            dst.pixels[i * src.width + j] = pixel
    return dst


def rotate_image(src: Image, degree: float) -> Image:
    """Rotate an image by ``degree`` into a new image sized to fit it."""
    radian = -math.radians(normalize_degree(degree))
    f_sin, f_cos = math.sin(radian), math.cos(radian)
    w, h = src.width, src.height
    corners = [
        (int(px * f_cos - py * f_sin), int(px * f_sin + py * f_cos))
        for px, py in ((0, 0), (w, 0), (0, h), (w, h))
    ]
    min_x = min(0, *(x for x, _ in corners))
    min_y = min(0, *(y for _, y in corners))
    max_x = max(0, *(x for x, _ in corners))
    max_y = max(0, *(y for _, y in corners))
    nw, nh = max_x - min_x, max_y - min_y

    dst = Image(nw, nh)
    for ni in range(nw):
        i = min_x + ni
        for nj in range(nh):
            j = min_y + nj
            nx = int(i * f_cos + j * f_sin)
            ny = int(-i * f_sin + j * f_cos)
            if 0 <= nx < w and 0 <= ny < h:
                dst.pixels[nj * nw + ni] = src.pixels[ny * w + nx]
    return dst


def _planes(src: Image) -> tuple[list[list[int]], list[list[int]], list[list[int]]]:
    rows = [[_rgb(p) for p in row] for row in src.rows()]
    return tuple(  # type: ignore[return-value]
        [[channels[c] for channels in row] for row in rows] for c in range(3)
    )


def _merge(src: Image, reds, greens, blues) -> Image:
    pixels = [
        _pack(pixel & _ALPHA_MASK, r, g, b)
        for pixel, r, g, b in zip(
            src.pixels,
            (v for row in reds for v in row),
            (v for row in greens for v in row),
            (v for row in blues for v in row),
        )
    ]
    return Image(src.width, src.height, pixels)


def _integral(plane: list[list[int]], width: int) -> list[list[int]]:
    table = [[0] * (width + 1)]
    for row in plane:
        above = table[-1]
        line = [0]
        running = 0
        for j, value in enumerate(row, start=1):
            running += value
            line.append(above[j] + running)
        table.append(line)
    return table


def mean_filter(src: Image, radius: int) -> Image:
    """Box-blur the colour channels with the given radius; alpha is kept."""
    if radius < 0:
        raise ValueError("radius must not be negative")
    if radius == 0 or not src.pixels:
        return src.copy()
    height, width = src.height, src.width
    tables = [_integral(plane, width) for plane in _planes(src)]
    pixels = []
    for i, pixel in enumerate(src.pixels):
        x, y = i // width + 1, i % width + 1
        x1, y1 = max(x - radius, 1), max(y - radius, 1)
        x2, y2 = min(x + radius, height), min(y + radius, width)
        area = (x2 - x1) * (y2 - y1)
        if area == 0:
            pixels.append(pixel)
            continue
        r, g, b = (
            _clamp((t[x2][y2] + t[x1][y1] - t[x2][y1] - t[x1][y2]) // area, 0, 255)
            for t in tables
        )
        pixels.append(_pack(pixel & _ALPHA_MASK, r, g, b))
    return Image(width, height, pixels)


def _gaussian_kernel(radius: int) -> list[float]:
    sigma = radius / 3.0
    raw = [
        math.exp(-(k - radius) ** 2 / (2 * sigma * sigma)) / (math.sqrt(2 * math.pi) * sigma)
        for k in range(2 * radius + 1)
    ]
    total = sum(raw)
    return [value / total for value in raw]


def _convolve(line: list[int], kernel: list[float], radius: int) -> list[int]:
    last = len(line) - 1
    return [
        min(255, int(sum(line[_clamp(x + k - radius, 0, last)] * weight
                         for k, weight in enumerate(kernel))))
        for x in range(len(line))
    ]


def gaussian_filter(src: Image, radius: int) -> Image:
    """Gaussian-blur the colour channels (horizontal then vertical); alpha is kept."""
    if radius < 0:
        raise ValueError("radius must not be negative")
    if radius == 0 or not src.pixels:
        return src.copy()
    kernel = _gaussian_kernel(radius)
    blurred = []
    for plane in _planes(src):
        horizontal = [_convolve(row, kernel, radius) for row in plane]
        columns = [_convolve(list(col), kernel, radius) for col in zip(*horizontal)]
        blurred.append([list(row) for row in zip(*columns)])
    return _merge(src, *blurred)


def apply_filters(src: Image, layers: Iterable[FilterInfo]) -> Image:
    """Blend colour filter layers over the visible pixels of an image.

    Layers are applied in order of their ``layer`` value; of several layers
    sharing a value only the first is used. Fully transparent pixels become 0.
    """
    chosen: dict[int, FilterInfo] = {}
    for info in layers:
        chosen.setdefault(info.layer, info)
    ordered = [chosen[key] for key in sorted(chosen)]

    pixels = []
    for pixel in src.pixels:
        alpha = (pixel >> 24) & 0xFF
        if not alpha:
            pixels.append(0)
            continue
        r, g, b = _rgb(pixel)
        for info in ordered:
            level = info.level
            if alpha < 255:
                level = (alpha * level) >> 8
            fr, fg, fb = _rgb(info.color)
            b = (b * (128 - level) + level * fb) >> 7
            g = (g * (128 - level) + level * fg) >> 7
            r = (r * (128 - level) + level * fr) >> 7
        pixels.append(_pack(pixel & _ALPHA_MASK, r, g, b))
    return Image(src.width, src.height, pixels)