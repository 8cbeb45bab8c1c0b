[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lehudata"
version = "0.1.0"
description = "Metric collection helpers: coded enums, statistics SQL builders, period arithmetic and Sonyflake-style id generation."
requires-python = ">=3.10"
dependencies = []
keywords = ["metrics", "statistics", "sql", "sonyflake", "enums", "periods"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lehudata"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
