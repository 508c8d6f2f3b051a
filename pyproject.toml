[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clinicdesk"
version = "0.1.0"
description = "A small clinic desk: register patients and book, move and cancel appointments, with everything kept in a JSON file."
requires-python = ">=3.10"
dependencies = []
keywords = ["clinic", "appointments", "patients", "scheduling", "json"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Healthcare Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
clinicdesk = "clinicdesk.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["clinicdesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
