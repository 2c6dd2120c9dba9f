"""Line classification for hole-by-hole course documents.

A course document is markdown-ish text. Sections open with a heading such as::

    ### **Chateau** Course: Hole-by-Hole Analysis

followed by table rows::

    | **6** | 3 | 150 | 140 | 136 | Excellent Option. |  |  |

Every line is classified into exactly one of :class:`HeaderLine`,
:class:`UnnamedHeader`, :class:`MalformedHeader`, :class:`RowLine` or
:class:`IgnoredLine`. The course name runs from ``### **`` to the next ``**`` or
the end of the line and is kept verbatim.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Tuple, Union

HEADER_PHRASE = "Course: Hole-by-Hole Analysis"
ROW_PREFIX = "| **"
ROW_MARKER = "** |"
MIN_ROW_FIELDS = 8

_HEADER_NAME_RE = re.compile(r"### \*\*(?P<name>.*?)(?:\*\*|$)")
_LEADING_INT_RE = re.compile(r"\s*[+-]?(\d+)")


@dataclass(frozen=True)
class HeaderLine:
    name: str


@dataclass(frozen=True)
class UnnamedHeader:
    line: str


# heading phrase without the ``### **`` marker
@dataclass(frozen=True)
class MalformedHeader:
    line: str


@dataclass(frozen=True)
class RowLine:
    fields: Tuple[str, ...]


@dataclass(frozen=True)
class IgnoredLine:
    pass


ScannedLine = Union[HeaderLine, UnnamedHeader, MalformedHeader, RowLine, IgnoredLine]

_IGNORED = IgnoredLine()


@dataclass(frozen=True)
class RowValues:
    hole: str
    par: Optional[int]
    gold: Optional[int]
    green: Optional[int]
    white: Optional[int]
    notes: str


def classify_line(line: str) -> ScannedLine:
    if HEADER_PHRASE in line:
        match = _HEADER_NAME_RE.search(line)
        if match is None:
            return MalformedHeader(line)
        name = match.group("name")
        if not name.strip():
            return UnnamedHeader(line)
        return HeaderLine(name)
    if line.startswith(ROW_PREFIX) and ROW_MARKER in line:
        fields = tuple(part.strip() for part in line.split("|"))
        if len(fields) >= MIN_ROW_FIELDS:
            return RowLine(fields)
    return _IGNORED


def parse_int(value: str) -> Optional[int]:
    """Parse the leading integer of ``value``; non-positive values count as absent."""

    match = _LEADING_INT_RE.match(value)
    if not match:
        return None
    number = int(match.group(0))
    return number if number > 0 else None


def row_values(row: RowLine) -> RowValues:
    fields = row.fields
    return RowValues(
        hole=fields[1].replace("**", "").strip(),
        par=parse_int(fields[2]),
        gold=parse_int(fields[3]),
        green=parse_int(fields[4]),
        white=parse_int(fields[5]),
        notes=fields[6],
    )


__all__ = [
    "HEADER_PHRASE",
    "HeaderLine",
    "IgnoredLine",
    "MalformedHeader",
    "RowLine",
    "RowValues",
    "ScannedLine",
    "UnnamedHeader",
    "classify_line",
    "parse_int",
    "row_values",
]
