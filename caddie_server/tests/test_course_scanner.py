from __future__ import annotations

import pytest

from caddie_server.courses.scanner import (
    HeaderLine,
    IgnoredLine,
    MalformedHeader,
    RowLine,
    UnnamedHeader,
    classify_line,
    parse_int,
    row_values,
)

CHATEAU_ROW_6 = "| **6** | 3 | 150 | 140 | 136 | Excellent Option. |  |  |"


def test_header_line_extracts_bold_course_name() -> None:
    scanned = classify_line("### **Chateau** Course: Hole-by-Hole Analysis")
    assert scanned == HeaderLine("Chateau")


def test_header_name_may_contain_spaces() -> None:
    scanned = classify_line("### **Chateau Elan** Course: Hole-by-Hole Analysis")
    assert scanned == HeaderLine("Chateau Elan")


def test_header_name_is_kept_verbatim() -> None:
    scanned = classify_line("### ** Chateau ** Course: Hole-by-Hole Analysis")
    assert scanned == HeaderLine(" Chateau ")


def test_header_without_closing_emphasis_takes_rest_of_line() -> None:
    scanned = classify_line("### **Woodlands Course: Hole-by-Hole Analysis")
    assert scanned == HeaderLine("Woodlands Course: Hole-by-Hole Analysis")


@pytest.mark.parametrize(
    "line",
    ["### **** Course: Hole-by-Hole Analysis", "### **   ** Course: Hole-by-Hole Analysis"],
)
def test_header_with_empty_name_is_unnamed(line: str) -> None:
    assert isinstance(classify_line(line), UnnamedHeader)


@pytest.mark.parametrize(
    "line",
    [
        "## Chateau Course: Hole-by-Hole Analysis",
        "Chateau Course: Hole-by-Hole Analysis",
        "### *Chateau* Course: Hole-by-Hole Analysis",
    ],
)
def test_heading_phrase_without_marker_is_malformed(line: str) -> None:
    assert isinstance(classify_line(line), MalformedHeader)


def test_table_row_is_split_into_trimmed_fields() -> None:
    scanned = classify_line(CHATEAU_ROW_6)
    assert isinstance(scanned, RowLine)
    assert scanned.fields[1] == "**6**"
    assert scanned.fields[5] == "136"
    assert scanned.fields[6] == "Excellent Option."
    assert len(scanned.fields) == 10


@pytest.mark.parametrize(
    "line",
    [
        "| **6** | 3 | 150 |",
        "| Hole | Par | Gold | Green | White | Notes | Fit | Rank |",
        "|------|-----|------|-------|-------|-------|-----|------|",
        "Yardages verified by the pro shop.",
        "",
        "  | **6** | 3 | 150 | 140 | 136 | indented | | |",
    ],
)
def test_other_lines_are_ignored(line: str) -> None:
    assert isinstance(classify_line(line), IgnoredLine)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("136", 136),
        (" 136 ", 136),
        ("136 yds", 136),
        ("-", None),
        ("N/A", None),
        ("", None),
        ("0", None),
        ("-5", None),
    ],
)
def test_parse_int_uses_leading_digits(value: str, expected) -> None:
    assert parse_int(value) == expected


def test_row_values_strip_emphasis_and_parse_numbers() -> None:
    row = classify_line("| **16** | 3 | - | 182 | 168 | Gold tee closed. | Fair | 5 |")
    assert isinstance(row, RowLine)
    values = row_values(row)
    assert values.hole == "16"
    assert values.par == 3
    assert values.gold is None
    assert values.green == 182
    assert values.white == 168
    assert values.notes == "Gold tee closed."
