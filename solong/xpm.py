"""Reading XPM pixmaps into 32-bit images."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

from solong.colornames import find_color
from solong.wordtab import find_substring, find_unquoted, split_words

BITS_PER_PIXEL = 32
LSB_FIRST = 0
MSB_FIRST = 1
TRANSPARENT = 0xFF000000

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_HEX_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")
_NAME_LIMIT = 63


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


@dataclass
class Image:
    """A pixel buffer of 32-bit pixels laid out row by row."""

    width: int
    height: int
    bits_per_pixel: int = BITS_PER_PIXEL
    endian: int = LSB_FIRST
    size_line: int = field(init=False)
    data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise XpmError("image dimensions must be positive")
        self.size_line = self.width * (self.bits_per_pixel // 8)
        self.data = bytearray(self.size_line * self.height)

    @property
    def _byteorder(self) -> str:
        return "big" if self.endian == MSB_FIRST else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * (self.bits_per_pixel // 8)

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel value stored at column x of row y."""
        start = self._offset(x, y)
        size = self.bits_per_pixel // 8
        return int.from_bytes(self.data[start:start + size], self._byteorder)

    def _set_pixel(self, x: int, y: int, value: int) -> None:
        start = self._offset(x, y)
        size = self.bits_per_pixel // 8
        mask = (1 << self.bits_per_pixel) - 1
        self.data[start:start + size] = (value & mask).to_bytes(size, self._byteorder)


def color_code(chars: str) -> int:
    """Return the numeric key of a pixel's characters, first character highest."""
    code = 0
    for char in chars:
        code = (code << 8) + ord(char)
    return code


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _hex_prefix(text: str) -> int:
    match = _HEX_PREFIX.match(text)
    if not match or not match.group(2):
        return 0
    value = int(match.group(2), 16)
    return -value if match.group(1) == "-" else value


def text_rgb(name: str, end: str | None = None) -> int:
    """Return the 0xRRGGBB value of a colour written as #hex or by name.

    A colour name may span two words, given as name and end. Unknown names
    give 0; the name "none" gives -1.
    """
    if name.startswith("#"):
        return _hex_prefix(name[1:])
    if end is not None:
        name = f"{name} {end}"[:_NAME_LIMIT]
    color = find_color(name)
    return 0 if color is None else color


def strip_comments(text: str) -> str:
    """Blank out C-style comments outside quoted strings, keeping the length."""
    while (begin := find_unquoted(text, "/*", len(text))) != -1:
        rest = text[begin + 2:]
        end = find_substring(rest, "*/", len(rest))
        count = end + 4
        text = text[:begin] + " " * count + text[begin + count:]
    while (begin := find_unquoted(text, "//", len(text))) != -1:
        rest = text[begin + 2:]
        end = find_substring(rest, "\n", len(rest))
        count = end + 3
        text = text[:begin] + " " * count + text[begin + count:]
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of each successive double-quoted string in text."""
    pos = 0
    while True:
        opening = text.find('"', pos)
        if opening < 0:
            return
        closing = text.find('"', opening + 1)
        if closing < 0:
            return
        yield text[opening + 1:closing]
        pos = closing + 1


def _read_header(line: str | None) -> tuple[int, int, int, int]:
    if line is None:
        raise XpmError("missing XPM header")
    words = split_words(line)
    if len(words) < 4:
        raise XpmError("XPM header needs width, height, colours and chars per pixel")
    values = tuple(_atoi(word) for word in words[:4])
    if any(value <= 0 for value in values):
        raise XpmError("XPM header values must be positive")
    width, height, ncolors, cpp = values
    return width, height, ncolors, cpp


def _read_color(line: str, cpp: int) -> int:
    words = split_words(line[cpp:])
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError(f"colour line without a 'c' key: {line!r}") from None
    if index >= len(words):
        raise XpmError(f"colour line without a colour value: {line!r}")
    end = words[index + 1] if index + 1 < len(words) else None
    return text_rgb(words[index], end)


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from the strings of an XPM: header, colours, then rows."""
    source = iter(lines)
    width, height, ncolors, cpp = _read_header(next(source, None))
    # With one or two characters per pixel a later definition replaces an
    # earlier one; with more, the first definition of a key is kept.
    later_wins = cpp <= 2
    colors: dict[int, int] = {}
    for _ in range(ncolors):
        line = next(source, None)
        if line is None:
            raise XpmError("missing colour definition")
        rgb = _read_color(line, cpp)
        code = color_code(line[:cpp])
        if later_wins:
            colors[code] = rgb
        else:
            colors.setdefault(code, rgb)

    image = Image(width, height)
    for y in range(height):
        line = next(source, None)
        if line is None:
            raise XpmError(f"missing pixel row {y}")
        for x in range(width):
            color = colors.get(color_code(line[cpp * x:cpp * (x + 1)]), 0)
            if color == -1:
                color = TRANSPARENT
            image._set_pixel(x, y, color)
    return image


def xpm_to_image(data: Iterable[str]) -> Image:
    """Build an image from XPM data already split into its strings."""
    return parse_xpm(data)


def xpm_file_to_image(path: str | Path) -> Image:
    """Read an XPM file and build an image from it."""
    text = Path(path).read_bytes().decode("latin-1")
    return parse_xpm(quoted_lines(strip_comments(text)))