"""Reading XPM pixmaps into images."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from os import PathLike
from pathlib import Path

from cubmap.colornames import lookup_color
from cubmap.pixels import Image, new_image
from cubmap.wordtab import find, find_unquoted, split_words

TRANSPARENT_PIXEL = 0xFF000000
_NAME_LIMIT = 63

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_HEX_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX])?([0-9a-fA-F]+)")
_QUOTED = re.compile(r'"([^"]*)"')


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _blank_comments(text: str, opener: str, closer: str) -> str:
    while (begin := find_unquoted(text, opener, len(text))) != -1:
        body = begin + len(opener)
        rel = find(text[body:], closer, len(text) - body)
        end = len(text) if rel == -1 else body + rel + len(closer)
        text = text[:begin] + " " * (end - begin) + text[end:]
    return text


def strip_comments(text: str) -> str:
    """Blank out C comments outside quoted strings, keeping the length."""
    text = _blank_comments(text, "/*", "*/")
    return _blank_comments(text, "//", "\n")


def color_key(text: str, cpp: int) -> int:
    """Pack the first ``cpp`` characters of text into an integer key."""
    if len(text) < cpp:
        raise XpmError(f"expected {cpp} characters, got {text!r}")
    key = 0
    for char in text[:cpp]:
        key = (key << 8) + ord(char)
    return key


def text_to_rgb(name: str, end: str | None) -> int:
    """Resolve an XPM colour value, optionally joined with the next word.

    "#RRGGBB" is read as hexadecimal; names are looked up ignoring case,
    "none" gives -1 and unknown names give 0.
    """
    if name.startswith("#"):
        match = _HEX_PREFIX.match(name[1:])
        if not match:
            return 0
        value = int(match.group(2), 16)
        return -value if match.group(1) == "-" else value
    if end is not None:
        name = f"{name} {end}"[:_NAME_LIMIT]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def _read_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"bad header: {line!r}")
    values = tuple(_atoi(word) for word in words[:4])
    if any(value <= 0 for value in values):
        raise XpmError(f"bad header: {line!r}")
    return values  # type: ignore[return-value]


def _read_color(line: str, cpp: int) -> tuple[int, int]:
    words = split_words(line[cpp:])
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError(f"no colour in line {line!r}") from None
    if index >= len(words):
        raise XpmError(f"no colour in line {line!r}")
    end = words[index + 1] if index + 1 < len(words) else None
    return color_key(line, cpp), text_to_rgb(words[index], end)


def parse_xpm(lines: Iterable[str], byte_order: int = 0) -> Image:
    """Build an image from the strings of an XPM: header, colours, rows."""
    source = iter(lines)
    width, height, ncolors, cpp = _read_header(_next_line(source, "header"))

    colors: dict[int, int] = {}
    for _ in range(ncolors):
        key, rgb = _read_color(_next_line(source, "colour line"), cpp)
        if cpp <= 2:
            colors[key] = rgb
        else:
            colors.setdefault(key, rgb)

    image = new_image(width, height, byte_order)
    for y in range(height):
        row = _next_line(source, "pixel row")
        for x in range(width):
            color = colors.get(color_key(row[cpp * x:], cpp), 0)
            if color == -1:
                color = TRANSPARENT_PIXEL
            image.set_pixel(x, y, color)
    return image


def xpm_to_image(xpm_data: Iterable[str], byte_order: int = 0) -> Image:
    """Build an image from in-memory XPM strings."""
    return parse_xpm(xpm_data, byte_order)


def _quoted_strings(text: str) -> Iterator[str]:
    for match in _QUOTED.finditer(text):
        yield match.group(1)


def xpm_file_to_image(path: str | PathLike[str], byte_order: int = 0) -> Image:
    """Read an XPM file and build an image from it."""
    text = Path(path).read_text(encoding="latin-1")
    return parse_xpm(_quoted_strings(strip_comments(text)), byte_order)