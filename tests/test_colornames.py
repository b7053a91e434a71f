import pytest

from solong.colornames import COLOR_NAMES, find_color


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("snow", 0xFFFAFA),
        ("white", 0xFFFFFF),
        ("black", 0x0),
        ("red", 0xFF0000),
        ("navy", 0x80),
        ("gray50", 0x7F7F7F),
        ("lightgreen", 0x90EE90),
    ],
)
def test_known_names(name, expected):
    assert find_color(name) == expected


def test_none_is_transparent():
    assert find_color("none") == -1


@pytest.mark.parametrize("name", ["SNOW", "Snow", "GhostWhite", "NONE", "Dark Red"])
def test_case_insensitive(name):
    assert find_color(name) == find_color(name.lower())
    assert find_color(name) is not None


def test_first_duplicate_wins():
    assert find_color("dark slate") == 0x2F4F4F
    assert find_color("light slate") == 0x778899
    assert find_color("light goldenrod") == 0xFAFAD2


@pytest.mark.parametrize("name", ["", "nosuchcolour", "snow ", "#ffffff", "gray101"])
def test_unknown_names(name):
    assert find_color(name) is None


def test_non_ascii_name_is_unknown():
    assert find_color("\u212aHAKI") is None


@pytest.mark.parametrize("level", range(101))
def test_gray_and_grey_agree(level):
    gray = find_color(f"gray{level}")
    assert gray is not None
    assert gray == find_color(f"grey{level}")


def test_spaced_and_joined_names_agree():
    for spaced in ("ghost white", "alice blue", "misty rose", "dark orange"):
        assert find_color(spaced) == find_color(spaced.replace(" ", ""))


def test_values_fit_in_24_bits():
    for name, value in COLOR_NAMES.items():
        if name == "none":
            continue
        assert 0 <= value <= 0xFFFFFF, name


def test_index_keys_are_lower_case_and_found():
    for name, value in COLOR_NAMES.items():
        assert name == name.lower()
        assert find_color(name.upper()) == value


def test_index_is_read_only():
    with pytest.raises(TypeError):
        COLOR_NAMES["snow"] = 0  # type: ignore[index]
    assert find_color("snow") == 0xFFFAFA