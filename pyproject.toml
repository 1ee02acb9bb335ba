[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "agenda_avaliacoes"
version = "2026.4.24.0"
description = "Academic assessment schedule: record exams, assignments and presentations in SQLite, list them by date and render them as HTML."
requires-python = ">=3.10"
dependencies = []
keywords = ["schedule", "agenda", "assessments", "exams", "students", "sqlite"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
agenda-avaliacoes = "agenda_avaliacoes.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["agenda_avaliacoes"]

[tool.pytest.ini_options]
addopts = "-ra"
