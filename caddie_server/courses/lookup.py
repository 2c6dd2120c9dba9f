from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Union

from .models import DEFAULT_TEE, TEE_COLORS, HoleRecord


class CourseLookupError(LookupError):
    """Base error for course/hole lookups."""


class CourseNotFoundError(CourseLookupError):
    def __init__(self, course: str, available: List[str]) -> None:
        super().__init__(f"course not found: {course}")
        self.course = course
        self.available = available


class AmbiguousCourseError(CourseLookupError):
    def __init__(self, course: str, candidates: List[str]) -> None:
        super().__init__(f"course name {course!r} matches {len(candidates)} courses")
        self.course = course
        self.candidates = candidates


class HoleNotFoundError(CourseLookupError):
    def __init__(self, course: str, hole: str, available: List[str]) -> None:
        super().__init__(f"hole {hole} not found on course {course}")
        self.course = course
        self.hole = hole
        self.available = available


@dataclass(frozen=True)
class HoleLookup:
    course: str
    hole: str
    par: int
    distance: int
    tee_color: str
    notes: str
    all_distances: Dict[str, int]


def normalize_tee(tee: Optional[str]) -> str:
    if tee:
        lowered = tee.strip().lower()
        if lowered in TEE_COLORS:
            return lowered
    return DEFAULT_TEE


def resolve_course_name(courses: Mapping[str, object], course: str) -> str:
    """Map a user supplied course name onto a key of ``courses``.

    Exact match first, then case-insensitive equality, then case-insensitive
    containment in either direction. More than one containment match raises
    :class:`AmbiguousCourseError`.
    """

    if course in courses:
        return course
    query = course.strip().lower()
    if not query:
        raise CourseNotFoundError(course, list(courses))

    equal = [key for key in courses if key.lower() == query]
    if len(equal) == 1:
        return equal[0]

    candidates = [
        key for key in courses if query in key.lower() or key.lower() in query
    ]
    if not candidates:
        raise CourseNotFoundError(course, list(courses))
    if len(candidates) > 1:
        raise AmbiguousCourseError(course, candidates)
    return candidates[0]


def get_hole(
    courses: Mapping[str, Mapping[str, HoleRecord]],
    course: str,
    hole: Union[str, int],
    tee: Optional[str] = None,
) -> HoleLookup:
    course_key = resolve_course_name(courses, course)
    holes = courses[course_key]
    hole_id = str(hole).strip()
    record = holes.get(hole_id)
    if record is None:
        raise HoleNotFoundError(course_key, hole_id, list(holes))

    tee_color = normalize_tee(tee)
    return HoleLookup(
        course=course_key,
        hole=hole_id,
        par=record.par,
        distance=record.distance_for(tee_color),
        tee_color=tee_color,
        notes=record.notes,
        all_distances=dict(record.yards),
    )


def find_hole(
    courses: Mapping[str, Mapping[str, HoleRecord]],
    course: str,
    hole: Union[str, int],
) -> Optional[HoleRecord]:
    """Like :func:`get_hole` but returns ``None`` instead of raising."""

    try:
        course_key = resolve_course_name(courses, course)
    except CourseLookupError:
        return None
    return courses[course_key].get(str(hole).strip())


__all__ = [
    "AmbiguousCourseError",
    "CourseLookupError",
    "CourseNotFoundError",
    "HoleLookup",
    "HoleNotFoundError",
    "find_hole",
    "get_hole",
    "normalize_tee",
    "resolve_course_name",
]
