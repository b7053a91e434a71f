"""Conversion of 0xRRGGBB colours to pixel values for shallow visuals."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ChannelShifts:
    """Position and width of each colour channel within a pixel value."""

    red_shift: int
    red_bits: int
    green_shift: int
    green_bits: int
    blue_shift: int
    blue_bits: int


def _shift_and_width(mask: int) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError("colour mask must be a positive bit mask")
    shift = 0
    while not mask & 1:
        mask >>= 1
        shift += 1
    width = 0
    while mask & 1:
        mask >>= 1
        width += 1
    return shift, width


def mask_shifts(red_mask: int, green_mask: int, blue_mask: int) -> ChannelShifts:
    """Derive channel positions and widths from a visual's colour masks."""
    red = _shift_and_width(red_mask)
    green = _shift_and_width(green_mask)
    blue = _shift_and_width(blue_mask)
    return ChannelShifts(*red, *green, *blue)


def good_color(color: int, depth: int, shifts: ChannelShifts) -> int:
    """Return the pixel value for an 0xRRGGBB colour on a visual of this depth.

    Visuals of depth 24 or more take the colour unchanged.
    """
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - shifts.red_bits)) << shifts.red_shift)
        + ((green >> (16 - shifts.green_bits)) << shifts.green_shift)
        + ((blue >> (16 - shifts.blue_bits)) << shifts.blue_shift)
    )