from __future__ import annotations

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field


class CourseDataRequest(BaseModel):
    course: Optional[str] = None
    hole: Optional[Union[int, str]] = None
    tee: Optional[str] = None


class CourseDataResponse(BaseModel):
    course: str = Field(..., description="course name as requested")
    courseKey: str = Field(..., description="matched course name in the catalog")
    hole: str
    par: int
    distance: int
    teeColor: str
    notes: str
    allDistances: Dict[str, int]


class CourseSummaryOut(BaseModel):
    name: str
    holes: List[str]
    holeCount: int


class CourseListResponse(BaseModel):
    source: str
    courses: List[CourseSummaryOut]
