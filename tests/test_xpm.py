import pytest

from solong.xpm import (
    TRANSPARENT,
    XpmError,
    XpmImage,
    extract_strings,
    load_xpm,
    parse_color,
    parse_xpm,
    split_words,
    strip_comments,
)

SAMPLE = ["2 2 2 1", "a c #FF0000", "b c None", "ab", "ba"]


def test_split_words_uses_spaces_and_tabs():
    assert split_words("  40 40\t 2 1\t") == ["40", "40", "2", "1"]


def test_split_words_empty():
    assert split_words(" \t ") == []


def test_strip_comments_keeps_length_and_drops_block():
    text = '/* XPM */ "a" /* note */ "b"'
    stripped = strip_comments(text)
    assert len(stripped) == len(text)
    assert "XPM" not in stripped
    assert extract_strings(stripped) == ["a", "b"]


def test_strip_comments_ignores_markers_inside_quotes():
    text = '"a/*b*/" "c//d"'
    assert strip_comments(text) == text


def test_strip_comments_line_comment():
    stripped = strip_comments('"x" // trailing "y"\n"z"')
    assert extract_strings(stripped) == ["x", "z"]


def test_extract_strings_drops_unpaired_quote():
    assert extract_strings('x "ab" y "cd" "e') == ["ab", "cd"]


def test_parse_color_hex():
    assert parse_color("#00ff00", None) == 0x00FF00


def test_parse_color_names_ignore_case():
    assert parse_color("red", None) == 0xFF0000
    assert parse_color("RED", None) == parse_color("red", None)


def test_parse_color_joins_suffix():
    assert parse_color("dark", "red") == 0x8B0000


def test_parse_color_none_and_unknown():
    assert parse_color("None", None) == -1
    assert parse_color("no-such-colour", None) == 0


def test_parse_xpm_basic_image():
    image = parse_xpm(SAMPLE)
    assert (image.width, image.height) == (2, 2)
    assert image.pixel(0, 0) == 0xFF0000
    assert image.pixel(1, 0) == TRANSPARENT
    assert image.pixel(0, 1) == TRANSPARENT
    assert image.pixel(1, 1) == 0xFF0000


def test_parse_xpm_two_char_keys():
    image = parse_xpm(["2 1 2 2", "aa c #000001", "bb c #000002", "bbaa"])
    assert image.rows == ((0x000002, 0x000001),)


def test_parse_xpm_undefined_key_is_zero():
    image = parse_xpm(["1 1 1 1", "a c #FFFFFF", "z"])
    assert image.pixel(0, 0) == 0


def test_parse_xpm_rejects_zero_header():
    with pytest.raises(XpmError):
        parse_xpm(["0 2 2 1", "a c #FF0000", "b c None"])


def test_parse_xpm_rejects_short_header():
    with pytest.raises(XpmError):
        parse_xpm(["2 2 2"])


def test_parse_xpm_requires_c_colour():
    with pytest.raises(XpmError):
        parse_xpm(["1 1 1 1", "a m #FF0000", "a"])


def test_parse_xpm_missing_rows():
    with pytest.raises(XpmError):
        parse_xpm(SAMPLE[:-1])


def test_parse_xpm_short_row():
    with pytest.raises(XpmError):
        parse_xpm(["2 1 1 1", "a c #FF0000", "a"])


def test_pixel_out_of_range():
    image = parse_xpm(SAMPLE)
    with pytest.raises(IndexError):
        image.pixel(2, 0)
    with pytest.raises(IndexError):
        image.pixel(0, -1)


def test_load_xpm_file(tmp_path):
    body = (
        "/* XPM */\n"
        "static char *tile[] = {\n"
        "/* columns rows colors chars-per-pixel */\n"
        + ",\n".join(f'"{line}"' for line in SAMPLE)
        + "\n};\n"
    )
    path = tmp_path / "tile.xpm"
    path.write_text(body)
    assert load_xpm(path) == parse_xpm(SAMPLE)


def test_load_xpm_missing_file(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "absent.xpm")


def test_image_equality_is_by_value():
    assert parse_xpm(SAMPLE) == XpmImage(2, 2, parse_xpm(SAMPLE).rows)