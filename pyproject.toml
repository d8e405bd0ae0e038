[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "academia"
version = "0.1.0"
description = "Academic records library for students, subjects, enrollments, exam grades and CSV storage"
requires-python = ">=3.10"
dependencies = []
keywords = ["students", "subjects", "enrollment", "grades", "academic", "csv"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["academia"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
