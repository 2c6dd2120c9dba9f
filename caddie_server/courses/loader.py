"""Course document loading.

``parse_course_document`` is a pure fold over the document lines.
``load_course_document`` wraps reading and parsing into a
:class:`CourseLoadResult`; ``load_course_catalog`` decides what to serve when
that result is a failure.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

from .fallback import fallback_table
from .models import DEFAULT_NOTES, CourseCatalog, CourseTable, HoleRecord
from .scanner import (
    HeaderLine,
    MalformedHeader,
    RowLine,
    UnnamedHeader,
    classify_line,
    row_values,
)

_LOG = logging.getLogger(__name__)


class CourseDocumentError(Exception):
    """Raised when a course document cannot be read or scanned."""


@dataclass
class _ScanState:
    current: Optional[str] = None
    courses: CourseTable = field(default_factory=dict)
    skipped_rows: int = 0

    def apply(self, line_no: int, line: str) -> None:
        scanned = classify_line(line)
        if isinstance(scanned, HeaderLine):
            self.current = scanned.name
            self.courses[scanned.name] = {}
            _LOG.info("found course %s", scanned.name)
        elif isinstance(scanned, UnnamedHeader):
            _LOG.warning(
                "course heading without a name at line %d: %r", line_no, line
            )
            self.current = None
        elif isinstance(scanned, MalformedHeader):
            raise CourseDocumentError(
                f"course heading without ### ** marker at line {line_no}: {line!r}"
            )
        elif isinstance(scanned, RowLine) and self.current is not None:
            self._apply_row(line_no, line, scanned)

    def _apply_row(self, line_no: int, line: str, row: RowLine) -> None:
        values = row_values(row)
        if values.par is None or values.white is None or not values.hole:
            _LOG.warning("skipping unparseable hole row at line %d: %r", line_no, line)
            self.skipped_rows += 1
            return
        self.courses[self.current][values.hole] = HoleRecord(
            par=values.par,
            yards={
                "gold": values.gold or values.white,
                "green": values.green or values.white,
                "white": values.white,
            },
            notes=values.notes or DEFAULT_NOTES,
        )


def parse_course_lines(lines: Iterable[str]) -> CourseTable:
    return _scan(lines).courses


def _scan(lines: Iterable[str]) -> _ScanState:
    state = _ScanState()
    for line_no, line in enumerate(lines, start=1):
        state.apply(line_no, line.rstrip("\r"))
    return state


def parse_course_document(text: str) -> CourseTable:
    """Build a course table from the full text of a course document.

    Raises :class:`CourseDocumentError` when a course heading lacks its
    ``### **`` marker.
    """

    _LOG.info("parsing course document, length=%d", len(text))
    state = _scan(text.split("\n"))
    courses = state.courses
    holes = sum(len(table) for table in courses.values())
    _LOG.info(
        "course parsing complete: %d courses, %d holes, %d rows skipped (%s)",
        len(courses),
        holes,
        state.skipped_rows,
        ", ".join(courses) or "none",
    )
    return courses


@dataclass(frozen=True)
class CourseLoadResult:
    courses: Optional[CourseTable] = None
    error: Optional[str] = None
    path: Optional[Path] = None

    @property
    def ok(self) -> bool:
        return self.courses is not None

    @classmethod
    def success(cls, courses: CourseTable, path: Optional[Path] = None) -> "CourseLoadResult":
        return cls(courses=courses, path=path)

    @classmethod
    def failure(cls, reason: str, path: Optional[Path] = None) -> "CourseLoadResult":
        return cls(error=reason, path=path)


def read_course_document(path: Path) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CourseDocumentError(f"unable to read course document {path}: {exc}") from exc


def load_course_document(path: Path) -> CourseLoadResult:
    """Read and parse ``path``; never raises."""

    path = Path(path)
    _LOG.info("loading course data from %s", path)
    try:
        text = read_course_document(path)
        courses = parse_course_document(text)
    except CourseDocumentError as exc:
        _LOG.error("error loading course data: %s", exc)
        return CourseLoadResult.failure(str(exc), path)
    except Exception as exc:
        _LOG.error("error scanning course data from %s", path, exc_info=True)
        return CourseLoadResult.failure(f"unable to scan course document: {exc}", path)
    return CourseLoadResult.success(courses, path)


def load_course_catalog(
    path: Path, fallback: Optional[CourseTable] = None
) -> CourseCatalog:
    """Load ``path`` into a catalog, serving ``fallback`` when loading fails."""

    result = load_course_document(path)
    if result.ok:
        return CourseCatalog(courses=result.courses, source="document", path=result.path)

    table = fallback if fallback is not None else fallback_table()
    _LOG.warning("using fallback course data (%d courses)", len(table))
    return CourseCatalog(
        courses=table, source="fallback", path=result.path, error=result.error
    )


__all__ = [
    "CourseDocumentError",
    "CourseLoadResult",
    "load_course_catalog",
    "load_course_document",
    "parse_course_document",
    "parse_course_lines",
    "read_course_document",
]
