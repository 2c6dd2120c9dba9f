"""Summarise a hole-by-hole course document.

    caddie-course-report data/courses/Chateau_Elan_Course.txt
    caddie-course-report --json path/to/course.txt
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Sequence

from caddie_server.config import DEFAULT_COURSE_DOCUMENT
from caddie_server.courses import CourseTable, load_course_document

LOGGER = logging.getLogger("caddie_server.tools.course_report")


def _hole_sort_key(hole: str) -> tuple:
    return (0, int(hole), "") if hole.isdigit() else (1, 0, hole)


def summarize(courses: CourseTable) -> List[Dict[str, object]]:
    rows: List[Dict[str, object]] = []
    for name, holes in courses.items():
        rows.append(
            {
                "course": name,
                "holes": len(holes),
                "par": sum(record.par for record in holes.values()),
                "white_yards": sum(record.yards["white"] for record in holes.values()),
                "par3": sorted(
                    (hole for hole, record in holes.items() if record.par == 3),
                    key=_hole_sort_key,
                ),
            }
        )
    return rows


def print_summary(rows: List[Dict[str, object]]) -> None:
    columns: List[tuple[str, str, str]] = [
        ("Course", "course", "left"),
        ("Holes", "holes", "right"),
        ("Par", "par", "right"),
        ("White (yds)", "white_yards", "right"),
        ("Par 3s", "par3", "left"),
    ]
    cells = [
        {
            key: ", ".join(value) if isinstance(value, list) else str(value)
            for key, value in row.items()
        }
        for row in rows
    ]
    widths: Dict[str, int] = {}
    for header, key, _ in columns:
        width = len(header)
        for cell in cells:
            width = max(width, len(cell.get(key, "")))
        widths[key] = width
    print(
        "  ".join(
            header.ljust(widths[key]) if align == "left" else header.rjust(widths[key])
            for header, key, align in columns
        )
    )
    print("  ".join("-" * widths[key] for _, key, _ in columns))
    for cell in cells:
        print(
            "  ".join(
                cell.get(key, "").ljust(widths[key])
                if align == "left"
                else cell.get(key, "").rjust(widths[key])
                for _, key, align in columns
            )
        )


def parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Parse a hole-by-hole course document and summarise it"
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=str(DEFAULT_COURSE_DOCUMENT),
        help="Course document to parse",
    )
    parser.add_argument(
        "--json", dest="as_json", action="store_true", help="Emit JSON instead of a table"
    )
    parser.add_argument(
        "--log-level", dest="log_level", default="WARNING", help="Logging level"
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING)
    )

    result = load_course_document(Path(args.path))
    if not result.ok:
        print(f"error: {result.error}", file=sys.stderr)
        return 1

    rows = summarize(result.courses)
    if args.as_json:
        print(json.dumps(rows, indent=2))
    else:
        print_summary(rows)

    if not rows:
        LOGGER.warning("No course sections found in %s", args.path)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
