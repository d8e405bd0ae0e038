# academia

A small library for keeping academic records: students, subjects,
prerequisites (correlatives), enrollments and exam grades, with CSV
storage between sessions.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `academia.linked_list`: `CircularList`, an ordered collection with
  `append`, `prepend`, `remove_first`, `remove_last`, `remove(data, eq)`,
  `find(data, eq)` (returns `(position, element)` or `None`), `clear`,
  `for_each`, `first`, `last`, `is_empty`, `len()` and iteration.
  `to_string(to_str)` renders `List: -> a <-> b <-` or `List: (empty)`
  with a newline at the end. `print(to_str)` writes that text to stdout.
- `academia.subject`: `Subject` (`id`, `name`, `credits`, `correlatives`),
  with `Subject.create(name, credits)` to assign the next sequential id.
  Also `compare_subject_by_id`.
- `academia.student`: `Student` (`id`, `name`, `age`, `average`,
  `enrollments`), with `Student.create(name, age)` to assign the next
  sequential id. Also `compare_student_by_id` and `compare_student_by_name`.
- `academia.enrollment`: `SubjectEnrollment`, `can_enroll`,
  `enroll_student`, `record_exam` and `obtain_student_average`.
- `academia.search`: `find_students_by_name` and
  `find_students_by_age_range` print each match, or a "not found" line,
  and return the matches. `get_student_by_id` and `get_subject_by_id`
  return the match or `None`.
- `academia.persistence`: `save_students_to_csv`, `load_students_from_csv`,
  `save_subjects_to_csv`, `load_subjects_from_csv`.

## Rules

- A student can enroll in a subject only after passing all of the
  subject's correlatives. A student cannot enroll in the same subject twice.
- Grades must be between 0 and 10. A grade of 4 or more passes. A subject
  that has already been passed cannot be graded again.
- A student's average is the mean of the grades of the subjects they
  have passed. It is 0 when they have passed none.

These functions return `False` when a rule is not met.

## CSV storage

Files are read from and written to `data_dir/filename`. `data_dir`
defaults to `data` in the current directory.

- The save functions overwrite the file, create the directory if it is
  missing, and return the path they wrote.
- The load functions append to the list you pass and return the number of
  records they read.
- A missing file raises `FileNotFoundError`. A malformed record raises
  `ValueError`, which names the file and the line.
- Enrollments loaded from a file have only the subject ids, with no
  grades.

`students.csv`:

```
id,name,age,average,enrolled_subject_ids
1,Juan,20,8.50,101;102;
```

`subjects.csv`:

```
id,name,credits,correlative_ids
102,Fisica,5,100;101;
```

## Example

```python
from academia.linked_list import CircularList
from academia.student import Student
from academia.subject import Subject
from academia.enrollment import enroll_student, record_exam
from academia.persistence import save_students_to_csv

student = Student.create("Ana", 20)
algebra = Subject.create("Algebra", 6)
enroll_student(student, algebra)
record_exam(student, algebra.id, 8.0)
print(student)  # [ID: 1] Name: Ana | Age: 20 | Average: 8.00 | Subjects: 1

save_students_to_csv(CircularList([student]), "students.csv")
```

## What it does not do

The package has no command and no interactive menu. It does not rank
students by average, show statistics, generate sample data or page
through listings. It is used as a library from your own code.