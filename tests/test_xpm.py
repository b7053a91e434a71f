import pytest

from solong.xpm import (
    TRANSPARENT,
    Image,
    XpmError,
    color_code,
    parse_xpm,
    quoted_lines,
    strip_comments,
    text_rgb,
    xpm_file_to_image,
    xpm_to_image,
)

SMALL = [
    "2 2 3 1",
    "a c #FF0000",
    "b c #00FF00",
    ". c None",
    "ab",
    "b.",
]


def test_color_code_single_char_is_its_ordinal():
    assert color_code("a") == ord("a")


def test_color_code_empty_and_distinct():
    assert color_code("") == 0
    assert color_code("ab") != color_code("ba")


def test_text_rgb_hex():
    assert text_rgb("#FF0000") == 0xFF0000
    assert text_rgb("#zz") == 0


def test_text_rgb_names():
    assert text_rgb("red") == 0xFF0000
    assert text_rgb("RED") == 0xFF0000
    assert text_rgb("ghost", "white") == 0xF8F8FF
    assert text_rgb("None") == -1
    assert text_rgb("nosuchcolour") == 0


def test_strip_comments_keeps_length_and_quotes():
    text = '/* note */"a /* kept */"\n// line\n"b"'
    stripped = strip_comments(text)
    assert len(stripped) == len(text)
    assert list(quoted_lines(stripped)) == ["a /* kept */", "b"]
    assert "note" not in stripped
    assert "line" not in stripped


def test_quoted_lines_ignores_unterminated():
    assert list(quoted_lines('"a" x "b c" "open')) == ["a", "b c"]


def test_parse_xpm_pixels():
    image = parse_xpm(SMALL)
    assert (image.width, image.height) == (2, 2)
    assert image.pixel(0, 0) == 0xFF0000
    assert image.pixel(1, 0) == 0x00FF00
    assert image.pixel(0, 1) == 0x00FF00
    assert image.pixel(1, 1) == TRANSPARENT


def test_image_layout_invariants():
    image = xpm_to_image(SMALL)
    assert image.bits_per_pixel == 32
    assert image.size_line == image.width * 4
    assert len(image.data) == image.size_line * image.height
    assert image.data[0:4] == (0xFF0000).to_bytes(4, "little")


def test_pixel_out_of_range():
    image = parse_xpm(SMALL)
    with pytest.raises(IndexError):
        image.pixel(2, 0)


def test_unknown_key_gives_zero():
    image = parse_xpm(["1 1 1 1", "a c #123456", "z"])
    assert image.pixel(0, 0) == 0


def test_short_cpp_later_definition_wins():
    image = parse_xpm(["1 1 2 1", "a c #FF0000", "a c #00FF00", "a"])
    assert image.pixel(0, 0) == 0x00FF00


def test_long_cpp_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "abc c #FF0000", "abc c #00FF00", "abc"])
    assert image.pixel(0, 0) == 0xFF0000


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["2 2 1"],
        ["0 2 1 1", "a c #000000", "aa", "aa"],
        ["1 1 1 1", "a #000000", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 1 1 1"],
        ["1 2 1 1", "a c #000000", "a"],
    ],
)
def test_parse_errors(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_file_round_trip(tmp_path):
    path = tmp_path / "tile.xpm"
    path.write_text(
        "/* XPM */\n"
        "static char *tile[] = {\n"
        "// size\n"
        '"2 1 2 1",\n'
        '"a c #0000FF",\n'
        '"b c white",\n'
        '"ba"\n'
        "};\n"
    )
    image = xpm_file_to_image(path)
    assert (image.width, image.height) == (2, 1)
    assert image.pixel(0, 0) == 0xFFFFFF
    assert image.pixel(1, 0) == 0x0000FF


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        xpm_file_to_image(tmp_path / "absent.xpm")


def test_empty_file(tmp_path):
    path = tmp_path / "empty.xpm"
    path.write_text("")
    with pytest.raises(XpmError):
        xpm_file_to_image(path)


def test_image_rejects_bad_size():
    with pytest.raises(XpmError):
        Image(0, 3)