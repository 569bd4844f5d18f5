[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "processos"
version = "0.1.0"
description = "Load, sort, count and summarise court case records exported as CSV"
requires-python = ">=3.10"
dependencies = []
keywords = ["csv", "court cases", "processos", "sorting", "reports"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
processos = "processos.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["processos"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
