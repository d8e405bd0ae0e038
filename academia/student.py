"""Students of the academic system."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import ClassVar, Iterator, Optional

from academia.linked_list import CircularList

NAME_MAX_LENGTH = 99


@dataclass(eq=False)
class Student:
    """A student with an average grade and a list of subject enrollments."""

    id: int
    name: str
    age: int
    average: float = 0.0
    enrollments: CircularList = field(default_factory=CircularList)

    _ids: ClassVar[Iterator[int]] = itertools.count(1)

    @classmethod
    def create(cls, name: str, age: int) -> "Student":
        """Build a student with the next sequential id, no grades and no enrollments."""
        return cls(next(cls._ids), name[:NAME_MAX_LENGTH], age)

    def __str__(self) -> str:
        return (
            f"[ID: {self.id}] Name: {self.name} | Age: {self.age} "
            f"| Average: {self.average:.2f} | Subjects: {len(self.enrollments)}"
        )


def compare_student_by_id(a: Optional[Student], b: Optional[Student]) -> bool:
    """True when both students are given and share the same id."""
    if a is None or b is None:
        return False
    return a.id == b.id


def compare_student_by_name(a: Optional[Student], b: Optional[Student]) -> bool:
    """True when both students are given and have the same name (case-sensitive)."""
    if a is None or b is None:
        return False
    return a.name == b.name