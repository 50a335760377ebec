import pytest

from solong.colors import color_by_name


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("snow", 0xFFFAFA),
        ("ghost white", 0xF8F8FF),
        ("black", 0x0),
        ("white", 0xFFFFFF),
        ("red", 0xFF0000),
        ("navy", 0x80),
        ("gray50", 0x7F7F7F),
        ("lightgreen", 0x90EE90),
        ("purple", 0xA020F0),
    ],
)
def test_known_names(name, value):
    assert color_by_name(name) == value


def test_none_is_transparent_marker():
    assert color_by_name("none") == -1


@pytest.mark.parametrize("name", ["RED", "Red", "rEd"])
def test_lookup_ignores_case(name):
    assert color_by_name(name) == color_by_name("red")


def test_spaced_and_joined_names_agree():
    assert color_by_name("ghost white") == color_by_name("ghostwhite")
    assert color_by_name("Light Gray") == color_by_name("lightgray")


def test_first_duplicate_entry_wins():
    assert color_by_name("dark slate") == 0x2F4F4F
    assert color_by_name("light slate") == 0x778899
    assert color_by_name("light goldenrod") == 0xFAFAD2


@pytest.mark.parametrize("level", range(101))
def test_gray_and_grey_spellings_match(level):
    assert color_by_name(f"gray{level}") == color_by_name(f"grey{level}")


def test_gray_scale_is_monotonic_and_neutral():
    values = [color_by_name(f"gray{level}") for level in range(101)]
    assert values == sorted(values)
    for value in values:
        red, green, blue = (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF
        assert red == green == blue


def test_values_fit_in_rgb():
    for name in ("snow", "gold", "thistle4", "darkred", "gray100"):
        assert 0 <= color_by_name(name) <= 0xFFFFFF


@pytest.mark.parametrize("name", ["", "notacolour", "gray101", "red5"])
def test_unknown_name_raises(name):
    with pytest.raises(KeyError):
        color_by_name(name)