from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from caddie_server.courses import (
    AmbiguousCourseError,
    CourseCatalog,
    CourseNotFoundError,
    HoleNotFoundError,
    get_hole,
)
from caddie_server.courses.store import get_course_catalog
from caddie_server.schemas.courses import (
    CourseDataRequest,
    CourseDataResponse,
    CourseListResponse,
    CourseSummaryOut,
)

router = APIRouter(prefix="/api", tags=["courses"])


@router.post("/course-data", response_model=CourseDataResponse)
def course_data(
    req: CourseDataRequest, catalog: CourseCatalog = Depends(get_course_catalog)
) -> CourseDataResponse:
    if not req.course or not req.hole:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "Missing course or hole parameter"},
        )

    try:
        found = get_hole(catalog.courses, req.course, req.hole, req.tee)
    except CourseNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error": "Course not found", "availableCourses": exc.available},
        ) from exc
    except AmbiguousCourseError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={"error": "Course name is ambiguous", "candidates": exc.candidates},
        ) from exc
    except HoleNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error": "Hole not found", "availableHoles": exc.available},
        ) from exc

    return CourseDataResponse(
        course=req.course,
        courseKey=found.course,
        hole=found.hole,
        par=found.par,
        distance=found.distance,
        teeColor=found.tee_color,
        notes=found.notes,
        allDistances=found.all_distances,
    )


@router.get("/courses", response_model=CourseListResponse)
def list_courses(
    catalog: CourseCatalog = Depends(get_course_catalog),
) -> CourseListResponse:
    """List loaded courses with their hole ids."""
    return CourseListResponse(
        source=catalog.source,
        courses=[
            CourseSummaryOut(name=name, holes=list(holes), holeCount=len(holes))
            for name, holes in catalog.courses.items()
        ],
    )


__all__ = ["router"]
