[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coursework"
version = "0.1.0"
description = "A mutable string type, a turn-based vehicle travel simulation and statistics-tracking stacks and queues"
requires-python = ">=3.10"
dependencies = []
keywords = ["string", "simulation", "vehicles", "stack", "queue", "statistics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["coursework"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
