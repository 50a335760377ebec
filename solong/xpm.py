"""Reader for XPM images, the texture format used by the game."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from solong.colors import color_by_name

TRANSPARENT = 0xFF000000
"""Pixel value stored for the colour "None"."""

_ATOI = re.compile(r"\s*([+-]?\d+)")
_HEX = re.compile(r"\s*([+-]?)([0-9a-fA-F]*)")
_NAME_LIMIT = 63


class XpmError(ValueError):
    """Raised when XPM data cannot be read as an image."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: rows of 0xRRGGBB pixels, transparent ones as 0xFF000000."""

    width: int
    height: int
    rows: tuple[tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.rows[y][x]


def split_words(text: str) -> list[str]:
    """Split text into words separated by spaces and tabs only."""
    return [word for word in re.split(r"[ \t]+", text) if word]


def _blank_comments(text: str, opener: str, closer: str, keep_closer: bool) -> str:
    in_quotes = False
    i = 0
    while i < len(text) - 1:
        if text[i] == '"':
            in_quotes = not in_quotes
        if not in_quotes and text.startswith(opener, i):
            end = text.find(closer, i + len(opener))
            stop = len(text) if end < 0 else end + (len(closer) if keep_closer else 1)
            text = text[:i] + " " * (stop - i) + text[stop:]
            i = stop
            continue
        i += 1
    return text


def strip_comments(text: str) -> str:
    """Replace C-style comments outside quoted strings with spaces.

    The result has the same length as the input.
    """
    text = _blank_comments(text, "/*", "*/", keep_closer=True)
    return _blank_comments(text, "//", "\n", keep_closer=False)


def extract_strings(text: str) -> list[str]:
    """Return the contents of each complete pair of double quotes, in order."""
    parts = text.split('"')
    pairs = (len(parts) - 1) // 2
    return parts[1 : 2 * pairs : 2]


def parse_color(name: str, suffix: str | None = None) -> int:
    """Turn an XPM colour specification into 0xRRGGBB.

    "#RRGGBB" is read as hexadecimal; otherwise the name (joined with the
    suffix word, if any) is looked up in the colour table. Unknown names
    give 0 and "None" gives -1.
    """
    if name.startswith("#"):
        match = _HEX.match(name[1:])
        sign, digits = match.group(1), match.group(2)
        value = int(digits, 16) if digits else 0
        return -value if sign == "-" else value
    full = f"{name} {suffix}" if suffix is not None else name
    try:
        return color_by_name(full[:_NAME_LIMIT])
    except KeyError:
        return 0


def _atoi(word: str) -> int:
    match = _ATOI.match(word)
    return int(match.group(1)) if match else 0


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode the quoted strings of an XPM image: header, colours, then pixel rows."""
    source = iter(lines)

    def next_line(what: str) -> str:
        try:
            return next(source)
        except StopIteration:
            raise XpmError(f"missing {what}") from None

    words = split_words(next_line("header"))
    if len(words) < 4:
        raise XpmError("header needs width, height, colour count and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("header values must be positive")

    # Short keys are stored directly, so a later definition replaces an earlier
    # one; longer keys are searched in order and the first definition is used.
    last_wins = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line("colour definition")
        if len(line) < cpp:
            raise XpmError("colour definition shorter than its key")
        key = line[:cpp]
        spec = split_words(line[cpp:])
        try:
            index = spec.index("c") + 1
            name = spec[index]
        except (ValueError, IndexError):
            raise XpmError(f"colour definition without a 'c' colour: {line!r}") from None
        suffix = spec[index + 1] if index + 1 < len(spec) else None
        if last_wins or key not in palette:
            palette[key] = parse_color(name, suffix)

    rows = []
    for _ in range(height):
        line = next_line("pixel row")
        if len(line) < width * cpp:
            raise XpmError("pixel row shorter than the image width")
        row = []
        for x in range(width):
            colour = palette.get(line[x * cpp : (x + 1) * cpp], 0)
            row.append(TRANSPARENT if colour == -1 else colour)
        rows.append(tuple(row))
    return XpmImage(width, height, tuple(rows))


def load_xpm(path: str | Path) -> XpmImage:
    """Read and decode an XPM file."""
    try:
        raw = Path(path).read_bytes()
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc.strerror or exc}") from exc
    text = strip_comments(raw.decode("latin-1"))
    return parse_xpm(extract_strings(text))