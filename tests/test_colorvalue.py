import pytest

from solong.colorvalue import ChannelShifts, good_color, mask_shifts

RGB565 = (0xF800, 0x07E0, 0x001F)


def test_mask_shifts_rgb565():
    assert mask_shifts(*RGB565) == ChannelShifts(11, 5, 5, 6, 0, 5)


def test_mask_shifts_rgb888():
    assert mask_shifts(0xFF0000, 0x00FF00, 0x0000FF) == ChannelShifts(
        16, 8, 8, 8, 0, 8
    )


def test_mask_shifts_zero_mask_rejected():
    with pytest.raises(ValueError):
        mask_shifts(0, 0x07E0, 0x001F)


def test_deep_visual_passes_colour_through():
    shifts = mask_shifts(*RGB565)
    assert good_color(0x123456, 24, shifts) == 0x123456
    assert good_color(0xABCDEF, 32, shifts) == 0xABCDEF


@pytest.mark.parametrize(
    "color, expected",
    [
        (0xFF0000, RGB565[0]),
        (0x00FF00, RGB565[1]),
        (0x0000FF, RGB565[2]),
        (0xFFFFFF, RGB565[0] | RGB565[1] | RGB565[2]),
        (0x000000, 0),
    ],
)
def test_rgb565_primaries_fill_their_masks(color, expected):
    assert good_color(color, 16, mask_shifts(*RGB565)) == expected


def test_channels_stay_within_masks():
    shifts = mask_shifts(*RGB565)
    full = RGB565[0] | RGB565[1] | RGB565[2]
    for color in (0x123456, 0x808080, 0xFEDCBA, 0x010203):
        assert good_color(color, 16, shifts) & ~full == 0


def test_channels_are_independent():
    shifts = mask_shifts(*RGB565)
    color = 0x9A4C21
    combined = good_color(color, 16, shifts)
    parts = (
        good_color(color & 0xFF0000, 16, shifts)
        + good_color(color & 0x00FF00, 16, shifts)
        + good_color(color & 0x0000FF, 16, shifts)
    )
    assert combined == parts