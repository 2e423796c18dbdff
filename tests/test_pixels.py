import pytest

from cubmap.pixels import Image, PixelFormat, new_image

IM1_SX = 42
IM1_SY = 42


def _map_color(x, y, w, h):
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


def test_new_image_data_info():
    img = new_image(IM1_SX, IM1_SY)
    info = img.data_info()
    assert info.bits_per_pixel == 32
    assert info.size_line == IM1_SX * 4
    assert info.endian == 0
    assert len(info.data) == info.size_line * IM1_SY


def test_fill_image_round_trip():
    fmt = PixelFormat()
    img = new_image(IM1_SX, IM1_SY)
    for y in range(IM1_SY):
        for x in range(IM1_SX):
            img.set_pixel(x, y, fmt.good_color(_map_color(x, y, IM1_SX, IM1_SY)))
    assert img.get_pixel(0, 0) == _map_color(0, 0, IM1_SX, IM1_SY)
    assert img.get_pixel(41, 41) == _map_color(41, 41, IM1_SX, IM1_SY)


def test_little_endian_layout():
    img = new_image(2, 1, 0)
    img.set_pixel(1, 0, 0x11223344)
    assert bytes(img.data[4:8]) == bytes([0x44, 0x33, 0x22, 0x11])


def test_big_endian_layout():
    img = new_image(2, 1, 1)
    img.set_pixel(0, 0, 0x11223344)
    assert bytes(img.data[0:4]) == bytes([0x11, 0x22, 0x33, 0x44])
    assert img.get_pixel(0, 0) == 0x11223344
    assert img.data_info().endian == 1


def test_pixel_out_of_bounds():
    img = new_image(3, 3)
    with pytest.raises(IndexError):
        img.set_pixel(3, 0, 0)
    with pytest.raises(IndexError):
        img.get_pixel(0, -1)


def test_invalid_size_rejected():
    with pytest.raises(ValueError):
        new_image(0, 5)


def test_invalid_byte_order_rejected():
    with pytest.raises(ValueError):
        Image(2, 2, 2)


def test_truecolor_keeps_color():
    assert PixelFormat().good_color(0xFF99FF) == 0xFF99FF


def test_default_shifts():
    assert PixelFormat().shifts() == (16, 8, 8, 8, 0, 8)


def test_rgb565_shifts_and_white():
    fmt = PixelFormat(depth=16, red_mask=0xF800, green_mask=0x07E0, blue_mask=0x001F)
    assert fmt.shifts() == (11, 5, 5, 6, 0, 5)
    assert fmt.good_color(0xFFFFFF) == 0xFFFF
    assert fmt.good_color(0x000000) == 0


def test_zero_mask_rejected():
    with pytest.raises(ValueError):
        PixelFormat(depth=16, red_mask=0).shifts()