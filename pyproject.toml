[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dpkit"
version = "0.1.0"
description = "Dynamic-programming solutions to classic counting and optimisation problems"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "dynamic programming",
    "combinatorics",
    "algorithms",
    "coin change",
    "edit distance",
    "competitive programming",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
dpkit = "dpkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dpkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
