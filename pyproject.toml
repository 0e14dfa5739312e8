[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "studentrecords"
version = "0.1.0"
description = "A small SQLite-backed store for students, their courses, attendance and progress."
requires-python = ">=3.10"
dependencies = []
keywords = ["students", "school", "attendance", "sqlite", "records"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
studentrecords = "studentrecords.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["studentrecords"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
