import pytest

from silkengine.imaging import (
    FilterInfo,
    Image,
    apply_filters,
    flip_image,
    gaussian_filter,
    get_pixel,
    mean_filter,
    normalize_degree,
    rotate_image,
    sector_image,
)


def _numbered(width, height):
    return Image(width, height, [0xFF000000 | (n + 1) for n in range(width * height)])


def _uniform(width, height, pixel):
    return Image(width, height, [pixel] * (width * height))


def test_image_defaults_to_transparent_black():
    img = Image(3, 2)
    assert img.pixels == [0] * 6


def test_image_rejects_wrong_pixel_count():
    with pytest.raises(ValueError):
        Image(2, 2, [1, 2, 3])


def test_image_rejects_negative_size():
    with pytest.raises(ValueError):
        Image(-1, 2)


def test_resize_changes_size_and_clears():
    img = _numbered(2, 2)
    img.resize(3, 4)
    assert (img.width, img.height) == (3, 4)
    assert img.pixels == [0] * 12


@pytest.mark.parametrize("degree", [-720.5, -90, 0, 45, 360, 725])
def test_normalize_degree_range_and_period(degree):
    result = normalize_degree(degree)
    assert 0 <= result < 360
    assert normalize_degree(degree + 360) == pytest.approx(result)


def test_normalize_degree_negative():
    assert normalize_degree(-90) == 270


def test_get_pixel_clamps():
    img = _numbered(3, 2)
    assert get_pixel(img, -5, 100) == img.pixels[2]
    assert get_pixel(img, 9, -9) == img.pixels[3]
    assert get_pixel(img, 1, 1) == img.pixels[4]


def test_flip_horizontal_reverses_rows():
    img = _numbered(3, 2)
    flipped = flip_image(img, True)
    assert flipped.rows() == [row[::-1] for row in img.rows()]


def test_flip_vertical_reverses_row_order():
    img = _numbered(3, 2)
    flipped = flip_image(img, False)
    assert flipped.rows() == img.rows()[::-1]


@pytest.mark.parametrize("horizontal", [True, False])
def test_flip_twice_is_identity(horizontal):
    img = _numbered(4, 3)
    assert flip_image(flip_image(img, horizontal), horizontal) == img


def test_sector_equal_angles_is_blank():
    img = _numbered(4, 4)
    assert sector_image(img, 30, 30).pixels == [0] * 16


def test_sector_full_turn_keeps_everything():
    img = _numbered(4, 4)
    assert sector_image(img, 90, 450) == img


def test_sector_upper_half():
    img = _numbered(4, 4)
    result = sector_image(img, 0, 180)
    rows = result.rows()
    assert rows[0] == img.rows()[0]
    assert rows[3] == [0, 0, 0, 0]


def test_rotate_zero_is_identity():
    img = _numbered(3, 2)
    assert rotate_image(img, 0) == img
    assert rotate_image(img, 360) == img


def test_rotate_quarter_swaps_dimensions():
    img = _numbered(3, 2)
    rotated = rotate_image(img, 90)
    assert (rotated.width, rotated.height) == (2, 3)
    assert set(rotated.pixels) <= set(img.pixels) | {0}


def test_rotate_half_turn_keeps_dimensions():
    img = _numbered(3, 2)
    rotated = rotate_image(img, 180)
    assert (rotated.width, rotated.height) == (3, 2)


def test_mean_filter_uniform_unchanged():
    img = _uniform(5, 4, 0x80102030)
    assert mean_filter(img, 2) == img


def test_mean_filter_zero_radius_copies():
    img = _numbered(3, 3)
    result = mean_filter(img, 0)
    assert result == img
    assert result is not img


def test_mean_filter_keeps_alpha():
    img = Image(3, 3, [0x11000000, 0x22FFFFFF, 0x33000000] * 3)
    result = mean_filter(img, 1)
    assert [p >> 24 for p in result.pixels] == [p >> 24 for p in img.pixels]


def test_mean_filter_negative_radius():
    with pytest.raises(ValueError):
        mean_filter(_numbered(2, 2), -1)


def test_gaussian_filter_uniform_nearly_unchanged():
    img = _uniform(5, 5, 0xFF6496C8)
    result = gaussian_filter(img, 2)
    for before, after in zip(img.pixels, result.pixels):
        assert before >> 24 == after >> 24
        for shift in (0, 8, 16):
            assert abs(((before >> shift) & 0xFF) - ((after >> shift) & 0xFF)) <= 1


def test_gaussian_filter_spreads_a_spike():
    pixels = [0xFF000000] * 25
    pixels[12] = 0xFFFFFFFF
    result = gaussian_filter(Image(5, 5, pixels), 1)
    center = result.pixels[12] & 0xFF
    neighbour = result.pixels[13] & 0xFF
    assert center < 255
    assert 0 < neighbour < center


def test_gaussian_filter_zero_radius_copies():
    img = _numbered(3, 3)
    assert gaussian_filter(img, 0) == img


def test_gaussian_filter_negative_radius():
    with pytest.raises(ValueError):
        gaussian_filter(_numbered(2, 2), -2)


def test_filters_level_zero_is_identity():
    img = _uniform(2, 2, 0xFF405060)
    assert apply_filters(img, [FilterInfo(0xFFFFFF, 0, 0)]) == img


def test_filters_clear_transparent_pixels():
    img = Image(2, 1, [0x00405060, 0xFF405060])
    result = apply_filters(img, [FilterInfo()])
    assert result.pixels[0] == 0


def test_filters_full_level_replaces_colour():
    img = _uniform(2, 1, 0xFF405060)
    result = apply_filters(img, [FilterInfo(0x102030, 128, 0)])
    assert result.pixels == [0xFF102030, 0xFF102030]


def test_filters_same_layer_keeps_first():
    img = _uniform(1, 1, 0xFF405060)
    first = FilterInfo(0x102030, 128, 0)
    second = FilterInfo(0xA0B0C0, 128, 0)
    assert apply_filters(img, [first, second]) == apply_filters(img, [first])


def test_filters_ordered_by_layer():
    img = _uniform(1, 1, 0xFF405060)
    top = FilterInfo(0x102030, 128, 1)
    bottom = FilterInfo(0xA0B0C0, 128, 0)
    assert apply_filters(img, [top, bottom]) == apply_filters(img, [top])