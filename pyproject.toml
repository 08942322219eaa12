[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hiveflow"
version = "0.1.0"
description = "Compose asynchronous tasks into sequential and parallel pipelines."
requires-python = ">=3.10"
dependencies = []
keywords = ["asyncio", "pipeline", "workflow", "tasks", "parallel", "dataflow"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Framework :: AsyncIO",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
hiveflow-example = "hiveflow.example:main"

[tool.hatch.build.targets.wheel]
packages = ["hiveflow"]

[tool.hatch.build.targets.sdist]
include = ["hiveflow", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
