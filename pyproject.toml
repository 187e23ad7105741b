[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "passvault"
version = "0.1.0"
description = "A small interactive password store backed by a separately chained hash table and MD5-crypt hashing"
requires-python = ">=3.10"
dependencies = []
keywords = ["password", "hash table", "md5crypt", "separate chaining", "interactive"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
passvault = "passvault.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["passvault"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
