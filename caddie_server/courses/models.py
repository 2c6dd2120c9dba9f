from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, PositiveInt

TeeColor = Literal["gold", "green", "white"]
TEE_COLORS: tuple[str, ...] = ("gold", "green", "white")
DEFAULT_TEE: TeeColor = "white"
DEFAULT_NOTES = "Standard hole"


class HoleRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    par: PositiveInt
    yards: Dict[str, PositiveInt]
    notes: str = DEFAULT_NOTES

    def distance_for(self, tee: str) -> int:
        """Yardage for ``tee``, falling back to the white tee."""

        return self.yards.get(tee) or self.yards[DEFAULT_TEE]


HoleTable = Dict[str, HoleRecord]
CourseTable = Dict[str, HoleTable]

CatalogSource = Literal["document", "fallback"]


@dataclass(frozen=True)
class CourseCatalog:
    """Loaded course table together with where it came from."""

    courses: Mapping[str, Mapping[str, HoleRecord]]
    source: CatalogSource = "document"
    path: Optional[Path] = None
    error: Optional[str] = None
    hole_count: int = field(init=False)

    def __post_init__(self) -> None:
        frozen = MappingProxyType(
            {name: MappingProxyType(dict(holes)) for name, holes in self.courses.items()}
        )
        object.__setattr__(self, "courses", frozen)
        object.__setattr__(
            self, "hole_count", sum(len(holes) for holes in frozen.values())
        )

    @property
    def course_names(self) -> list[str]:
        return list(self.courses.keys())

    def to_table(self) -> CourseTable:
        return {name: dict(holes) for name, holes in self.courses.items()}


__all__ = [
    "CatalogSource",
    "CourseCatalog",
    "CourseTable",
    "DEFAULT_NOTES",
    "DEFAULT_TEE",
    "HoleRecord",
    "HoleTable",
    "TEE_COLORS",
    "TeeColor",
]
