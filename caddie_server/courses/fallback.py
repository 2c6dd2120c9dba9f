"""Fixed course table served when the course document cannot be loaded."""

from __future__ import annotations

from .models import CourseTable, HoleRecord

FALLBACK_COURSES: CourseTable = {
    "Chateau": {
        "6": HoleRecord(
            par=3, yards={"white": 136}, notes="Excellent Option. A classic Par 3."
        ),
        "8": HoleRecord(
            par=3, yards={"white": 155}, notes="Excellent Option. A longer Par 3."
        ),
        "12": HoleRecord(
            par=3,
            yards={"white": 149},
            notes="Excellent Option. Another great Par 3.",
        ),
    },
    "Woodlands": {
        "2": HoleRecord(
            par=3,
            yards={"white": 172},
            notes="Excellent Option. A Par 3 early in the round.",
        ),
        "6": HoleRecord(
            par=3, yards={"white": 171}, notes="Excellent Option. A long Par 3."
        ),
        "13": HoleRecord(
            par=3,
            yards={"white": 134},
            notes="Excellent Option. Another perfectly placed Par 3.",
        ),
    },
}


def fallback_table() -> CourseTable:
    """Return a fresh copy of the fallback table."""

    return {name: dict(holes) for name, holes in FALLBACK_COURSES.items()}
