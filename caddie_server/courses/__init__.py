"""Course data: document loading, fallback table and hole lookups."""

from .fallback import FALLBACK_COURSES, fallback_table
from .loader import (
    CourseDocumentError,
    CourseLoadResult,
    load_course_catalog,
    load_course_document,
    parse_course_document,
)
from .lookup import (
    AmbiguousCourseError,
    CourseLookupError,
    CourseNotFoundError,
    HoleLookup,
    HoleNotFoundError,
    find_hole,
    get_hole,
    normalize_tee,
)
from .models import CourseCatalog, CourseTable, HoleRecord

__all__ = [
    "AmbiguousCourseError",
    "CourseCatalog",
    "CourseDocumentError",
    "CourseLoadResult",
    "CourseLookupError",
    "CourseNotFoundError",
    "CourseTable",
    "FALLBACK_COURSES",
    "HoleLookup",
    "HoleNotFoundError",
    "HoleRecord",
    "fallback_table",
    "find_hole",
    "get_hole",
    "load_course_catalog",
    "load_course_document",
    "parse_course_document",
    "normalize_tee",
]
