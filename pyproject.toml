[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mariadbpp"
version = "0.1.0"
description = "Value types, type mapping, conversions, SQL time arithmetic and transaction helpers for MariaDB clients"
requires-python = ">=3.10"
keywords = ["mariadb", "mysql", "database", "sql", "time", "transaction"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mariadbpp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
