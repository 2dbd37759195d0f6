[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fiftyeight"
version = "0.5.1"
description = "Base58 encoding and decoding with configurable alphabets, Base58Check and CB58 support."
requires-python = ">=3.10"
dependencies = []
keywords = ["base58", "base58check", "cb58", "encoding", "bitcoin"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Environment :: Console",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
fiftyeight = "fiftyeight.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fiftyeight"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
