"""Named pools of images, animations, audio and fonts loaded from disk."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Callable, Iterable, Sequence

from PIL import Image as PILImage

from .imaging import Image

ImageLoader = Callable[[Path, int, int], Image]


def _pillow_loader(path: Path, width: int, height: int) -> Image:
    """Read an image file, scale it to ``width`` x ``height`` and pack it as ARGB."""
    with PILImage.open(path) as source:
        picture = source.convert("RGBA").resize((width, height))
    raw = picture.tobytes()
    pixels = [
        (raw[k + 3] << 24) | (raw[k] << 16) | (raw[k + 1] << 8) | raw[k + 2]
        for k in range(0, len(raw), 4)
    ]
    return Image(width, height, pixels)


@dataclass(frozen=True)
class AnimationResource:
    """The frames of one animation, in playing order."""

    frames: tuple[Image, ...]

    @property
    def num(self) -> int:
        return len(self.frames)

    def __len__(self) -> int:
        return len(self.frames)

    def __iter__(self):
        return iter(self.frames)


def slice_sheet(sheet: Image, count: int, rows: int, columns: int) -> list[Image]:
    """Cut a sprite sheet into ``count`` frames, read row by row.

    Each cell is ``sheet.width // columns`` by ``sheet.height // rows`` pixels.
    """
    if rows <= 0 or columns <= 0:
        raise ValueError("rows and columns must be positive")
    if count < 0:
        raise ValueError("frame count must not be negative")
    if count > rows * columns:
        raise ValueError(f"a {rows}x{columns} sheet holds at most {rows * columns} frames")
    cell_w = sheet.width // columns
    cell_h = sheet.height // rows
    sheet_rows = sheet.rows()
    frames = []
    for index in range(count):
        row, column = divmod(index, columns)
        top, left = row * cell_h, column * cell_w
        cell = [line[left:left + cell_w] for line in sheet_rows[top:top + cell_h]]
        frames.append(Image(cell_w, cell_h, [pixel for line in cell for pixel in line]))
    return frames


class ResourceManager:
    """Loads resources under a root directory and hands them out by name.

    A name that is already taken keeps its first resource. Fetching an
    unknown name returns None.
    """

    def __init__(self, root: str | PathLike | None = None, loader: ImageLoader | None = None) -> None:
        self.root = Path(root) if root is not None else Path.cwd()
        self._loader: ImageLoader = loader or _pillow_loader
        self._images: dict[str, Image] = {}
        self._animations: dict[str, AnimationResource] = {}
        self._audio: dict[str, Path] = {}
        self.fonts: list[Path] = []

    def _resolve(self, path: str | PathLike) -> Path:
        return self.root / path

    def _load(self, path: Path, width: float, height: float) -> Image:
        return self._loader(path, int(width), int(height))

    def _add_animation(self, name: str, frames: Iterable[Image]) -> AnimationResource:
        return self._animations.setdefault(name, AnimationResource(tuple(frames)))

    def load_image(self, name: str, path: str | PathLike, width: float, height: float) -> Image:
        """Load a single image scaled to the given size."""
        if name in self._images:
            return self._images[name]
        image = self._load(self._resolve(path), width, height)
        self._images[name] = image
        return image

    def load_frames(
        self, name: str, path: str | PathLike, width: float, height: float, count: int
    ) -> AnimationResource:
        """Load frames ``0.png`` .. ``{count-1}.png`` from a folder, all one size."""
        return self.load_sized_frames(name, path, [(width, height)] * count)

    def load_sized_frames(
        self, name: str, path: str | PathLike, sizes: Sequence[tuple[float, float]]
    ) -> AnimationResource:
        """Load numbered frames from a folder, each scaled to its own size."""
        if name in self._animations:
            return self._animations[name]
        folder = self._resolve(path)
        frames = [
            self._load(folder / f"{index}.png", width, height)
            for index, (width, height) in enumerate(sizes)
        ]
        return self._add_animation(name, frames)

    def load_sheet(
        self,
        name: str,
        path: str | PathLike,
        width: float,
        height: float,
        count: int,
        rows: int,
        columns: int,
    ) -> AnimationResource:
        """Load a sprite sheet scaled to the given size and cut it into frames."""
        if name in self._animations:
            return self._animations[name]
        sheet = self._load(self._resolve(path), width, height)
        return self._add_animation(name, slice_sheet(sheet, count, rows, columns))

    def load_audio(self, name: str, path: str | PathLike) -> Path:
        """Register an audio file under ``name``."""
        return self._audio.setdefault(name, self._resolve(path))

    def load_font(self, path: str | PathLike) -> Path:
        """Register a font file for text rendering."""
        font = self._resolve(path)
        if font not in self.fonts:
            self.fonts.append(font)
        return font

    def fetch(self, name: str) -> Image | None:
        return self._images.get(name)

    def fetch_animation(self, name: str) -> AnimationResource | None:
        return self._animations.get(name)

    def fetch_audio(self, name: str) -> Path | None:
        return self._audio.get(name)