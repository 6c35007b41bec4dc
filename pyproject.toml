[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "koltseglista"
version = "1.0.0"
description = "A small expense ledger kept in a semicolon-separated file, with an interactive menu"
requires-python = ">=3.10"
dependencies = []
keywords = ["expenses", "ledger", "budget", "csv", "accounting"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Hungarian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
koltseglista = "koltseglista.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["koltseglista"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
