"""Academic records library: students, subjects, enrollments, grades and CSV storage."""

__version__ = "0.1.0"