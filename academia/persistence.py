"""Saving and loading students and subjects as CSV files."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Union

from academia.enrollment import SubjectEnrollment
from academia.linked_list import CircularList
from academia.student import Student
from academia.subject import Subject

PathLike = Union[str, Path]

DEFAULT_DATA_DIR = Path("data")
STUDENTS_HEADER = "id,name,age,average,enrolled_subject_ids"
SUBJECTS_HEADER = "id,name,credits,correlative_ids"
LOADED_NAME_MAX_LENGTH = 49


def _path(filename: PathLike, data_dir: PathLike) -> Path:
    return Path(data_dir) / filename


def _format_ids(ids: Iterable[int]) -> str:
    return "".join(f"{i};" for i in ids)


def _parse_ids(raw: str) -> List[int]:
    return [int(token) for token in raw.split(";") if token.strip()]


def _records(path: Path, min_fields: int, max_fields: int):
    """Yield (line number, fields) for each data row, skipping the header and blank lines."""
    with path.open(encoding="utf-8") as f:
        next(f, None)
        for lineno, line in enumerate(f, start=2):
            line = line.rstrip("\r\n")
            if not line.strip():
                continue
            fields = line.split(",", max_fields - 1)
            if len(fields) < min_fields:
                raise ValueError(f"{path}:{lineno}: malformed record: {line!r}")
            fields += [""] * (max_fields - len(fields))
            yield lineno, fields


def save_students_to_csv(
    students: Iterable[Student], filename: PathLike, data_dir: PathLike = DEFAULT_DATA_DIR
) -> Path:
    """Write students to data_dir/filename, overwriting it; return the path written."""
    path = _path(filename, data_dir)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="\n") as f:
        f.write(STUDENTS_HEADER + "\n")
        for s in students:
            ids = _format_ids(e.subject_id for e in s.enrollments)
            f.write(f"{s.id},{s.name},{s.age},{s.average:.2f},{ids}\n")
    return path


def load_students_from_csv(
    students: CircularList, filename: PathLike, data_dir: PathLike = DEFAULT_DATA_DIR
) -> int:
    """Append the students stored in data_dir/filename; return how many were read."""
    path = _path(filename, data_dir)
    loaded = 0
    for lineno, (sid, name, age, average, raw_ids) in _records(path, 4, 5):
        try:
            student = Student(
                int(sid),
                name[:LOADED_NAME_MAX_LENGTH],
                int(age),
                float(average),
                CircularList(SubjectEnrollment(i) for i in _parse_ids(raw_ids)),
            )
        except ValueError as exc:
            raise ValueError(f"{path}:{lineno}: {exc}") from exc
        students.append(student)
        loaded += 1
    return loaded


def save_subjects_to_csv(
    subjects: Iterable[Subject], filename: PathLike, data_dir: PathLike = DEFAULT_DATA_DIR
) -> Path:
    """Write subjects to data_dir/filename, overwriting it; return the path written."""
    path = _path(filename, data_dir)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="\n") as f:
        f.write(SUBJECTS_HEADER + "\n")
        for s in subjects:
            ids = _format_ids(s.correlatives)
            f.write(f"{s.id},{s.name},{s.credits},{ids}\n")
    return path


def load_subjects_from_csv(
    subjects: CircularList, filename: PathLike, data_dir: PathLike = DEFAULT_DATA_DIR
) -> int:
    """Append the subjects stored in data_dir/filename; return how many were read."""
    path = _path(filename, data_dir)
    loaded = 0
    for lineno, (sid, name, credits, raw_ids) in _records(path, 3, 4):
        try:
            subject = Subject(
                int(sid),
                name[:LOADED_NAME_MAX_LENGTH],
                int(credits),
                CircularList(_parse_ids(raw_ids)),
            )
        except ValueError as exc:
            raise ValueError(f"{path}:{lineno}: {exc}") from exc
        subjects.append(subject)
        loaded += 1
    return loaded