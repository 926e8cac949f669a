[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dietassist"
version = "0.1.0"
description = "Interactive diet assistant: a food database, daily food logs, a diet profile and target calorie calculation with undo."
requires-python = ">=3.10"
dependencies = []
keywords = ["diet", "calories", "nutrition", "food log", "bmr"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dietassist = "dietassist.app:main"

[tool.hatch.build.targets.wheel]
packages = ["dietassist"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
