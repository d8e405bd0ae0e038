"""Lookup of students and subjects in their lists."""

from __future__ import annotations

from typing import Iterable, List, Optional

from academia.student import Student
from academia.subject import Subject


def find_students_by_name(students: Optional[Iterable[Student]], name: Optional[str]) -> List[Student]:
    """Print and return the students with exactly this name."""
    if students is None or name is None:
        return []
    students = list(students)
    if not students:
        return []
    matches = [s for s in students if s.name == name]
    for s in matches:
        print(s)
    if not matches:
        print(f"No student found with name: {name}")
    return matches


def find_students_by_age_range(
    students: Optional[Iterable[Student]], min_age: int, max_age: int
) -> List[Student]:
    """Print and return the students whose age lies in [min_age, max_age]."""
    if students is None:
        return []
    students = list(students)
    if not students:
        return []
    matches = [s for s in students if min_age <= s.age <= max_age]
    for s in matches:
        print(s)
    if not matches:
        print(f"No students found in age range {min_age} - {max_age}.")
    return matches


def get_student_by_id(students: Optional[Iterable[Student]], student_id: int) -> Optional[Student]:
    """Return the student with this id, or None."""
    if students is None:
        return None
    return next((s for s in students if s.id == student_id), None)


def get_subject_by_id(subjects: Optional[Iterable[Subject]], subject_id: int) -> Optional[Subject]:
    """Return the subject with this id, or None."""
    if subjects is None:
        return None
    return next((s for s in subjects if s.id == subject_id), None)