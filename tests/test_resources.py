from pathlib import Path

import pytest
from PIL import Image as PILImage

from silkengine.imaging import Image
from silkengine.resources import AnimationResource, ResourceManager, slice_sheet


class RecordingLoader:
    def __init__(self, fill=0xFF102030):
        self.calls = []
        self.fill = fill

    def __call__(self, path, width, height):
        self.calls.append((path, width, height))
        return Image(width, height, [self.fill] * (width * height))


@pytest.fixture
def loader():
    return RecordingLoader()


@pytest.fixture
def manager(tmp_path, loader):
    return ResourceManager(tmp_path, loader)


def test_load_image_and_fetch(manager, loader, tmp_path):
    image = manager.load_image("chest", "Asset/Images/chest.png", 12, 7)
    assert manager.fetch("chest") is image
    assert (image.width, image.height) == (12, 7)
    assert loader.calls == [(tmp_path / "Asset/Images/chest.png", 12, 7)]


def test_float_sizes_are_truncated(manager, loader):
    image = manager.load_image("menu_1", "title-bg.png", 9.9, 4.0)
    assert (image.width, image.height) == (9, 4)


def test_duplicate_name_keeps_first(manager, loader):
    first = manager.load_image("dart", "a.png", 2, 2)
    second = manager.load_image("dart", "b.png", 5, 5)
    assert second is first
    assert len(loader.calls) == 1


def test_missing_names_fetch_none(manager):
    assert manager.fetch("nothing") is None
    assert manager.fetch_animation("nothing") is None
    assert manager.fetch_audio("nothing") is None


def test_load_frames_uses_numbered_files(manager, loader, tmp_path):
    anim = manager.load_frames("player_idle", "Asset/Animations/Player/Idle/", 3, 4, 6)
    assert anim.num == 6
    assert len(anim) == 6
    folder = tmp_path / "Asset/Animations/Player/Idle"
    assert [call[0] for call in loader.calls] == [folder / f"{i}.png" for i in range(6)]
    assert all((f.width, f.height) == (3, 4) for f in anim)
    assert manager.fetch_animation("player_idle") is anim


def test_load_sized_frames_sizes_each_frame(manager):
    sizes = [(4, 5), (6, 7), (2, 3)]
    anim = manager.load_sized_frames("player_turn", "Turn", sizes)
    assert [(f.width, f.height) for f in anim.frames] == sizes


def test_slice_sheet_row_major():
    sheet = Image(4, 2, list(range(8)))
    frames = slice_sheet(sheet, 4, 2, 2)
    assert [f.pixels for f in frames] == [[0, 1], [2, 3], [4, 5], [6, 7]]
    assert all((f.width, f.height) == (2, 1) for f in frames)


def test_slice_sheet_stops_at_count():
    sheet = Image(3, 3, list(range(9)))
    frames = slice_sheet(sheet, 2, 3, 3)
    assert [f.pixels for f in frames] == [[0], [1]]


def test_slice_sheet_rejects_too_many_frames():
    with pytest.raises(ValueError):
        slice_sheet(Image(2, 2), 5, 2, 2)


def test_slice_sheet_rejects_zero_rows():
    with pytest.raises(ValueError):
        slice_sheet(Image(2, 2), 1, 0, 2)


def test_load_sheet(tmp_path):
    def sheet_loader(path, width, height):
        return Image(width, height, list(range(width * height)))

    manager = ResourceManager(tmp_path, sheet_loader)
    anim = manager.load_sheet("effect_dash_", "sheet.png", 6, 2, 5, 2, 3)
    assert isinstance(anim, AnimationResource)
    assert anim.num == 5
    assert anim.frames[0].pixels == [0, 1]
    assert anim.frames[3].pixels == [6, 7]


def test_audio_and_fonts(manager, tmp_path):
    path = manager.load_audio("menu", "Asset/Sounds/menu.mp3")
    assert path == tmp_path / "Asset/Sounds/menu.mp3"
    assert manager.fetch_audio("menu") == path
    manager.load_font("Asset/TrajanPro.ttf")
    manager.load_font("Asset/TrajanPro.ttf")
    assert manager.fonts == [tmp_path / "Asset/TrajanPro.ttf"]


def test_default_loader_reads_png(tmp_path):
    picture = PILImage.new("RGBA", (2, 1))
    picture.putpixel((0, 0), (255, 0, 0, 255))
    picture.putpixel((1, 0), (0, 0, 255, 128))
    picture.save(tmp_path / "tiny.png")

    manager = ResourceManager(tmp_path)
    image = manager.load_image("tiny", "tiny.png", 2, 1)
    assert image.pixels == [0xFFFF0000, 0x800000FF]


def test_default_loader_missing_file(tmp_path):
    manager = ResourceManager(tmp_path)
    with pytest.raises(FileNotFoundError):
        manager.load_image("ghost", Path("missing.png"), 2, 2)
    assert manager.fetch("ghost") is None