[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "txbutil"
version = "0.1.0"
description = "Small utility library: integer log2, MD5 hashing, permutations, string helpers, a string read stream and simple containers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "md5",
    "permutation",
    "log2",
    "linked list",
    "queue",
    "keyed list",
    "dynamic array",
    "read stream",
    "strings",
]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["txbutil"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
