"""Enrolling students in subjects and recording their exam results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from academia.linked_list import CircularList
from academia.student import Student
from academia.subject import Subject

PASSING_GRADE = 4.0
MIN_GRADE = 0.0
MAX_GRADE = 10.0


@dataclass
class SubjectEnrollment:
    """A student's enrollment in one subject; grade is -1 until an exam is recorded."""

    subject_id: int
    passed: bool = False
    grade: float = -1.0


def _has_passed(student: Student, subject_id: int) -> bool:
    return any(e.subject_id == subject_id and e.passed for e in student.enrollments)


def can_enroll(
    student: Optional[Student],
    subject: Optional[Subject],
    all_subjects: Optional[CircularList] = None,
) -> bool:
    """True when the student has passed every correlative of the subject."""
    if student is None or subject is None:
        return False
    return all(_has_passed(student, cid) for cid in subject.correlatives)


def enroll_student(
    student: Optional[Student],
    subject: Optional[Subject],
    all_subjects: Optional[CircularList] = None,
) -> bool:
    """Enroll the student unless already enrolled or missing prerequisites."""
    if student is None or subject is None:
        return False
    if any(e.subject_id == subject.id for e in student.enrollments):
        return False
    if not can_enroll(student, subject, all_subjects):
        return False
    student.enrollments.append(SubjectEnrollment(subject.id))
    return True


def record_exam(student: Optional[Student], subject_id: int, grade: float) -> bool:
    """Record a grade for an enrolled, not yet passed subject and update the average."""
    if student is None or not MIN_GRADE <= grade <= MAX_GRADE:
        return False
    found = student.enrollments.find(subject_id, lambda e, sid: e.subject_id == sid)
    if found is None:
        return False
    enrollment = found[1]
    if enrollment.passed:
        return False
    enrollment.grade = grade
    enrollment.passed = grade >= PASSING_GRADE
    student.average = obtain_student_average(student)
    return True


def obtain_student_average(student: Optional[Student]) -> float:
    """Mean grade over passed subjects, or 0.0 when none are passed."""
    if student is None:
        return 0.0
    grades = [e.grade for e in student.enrollments if e is not None and e.passed]
    return sum(grades) / len(grades) if grades else 0.0