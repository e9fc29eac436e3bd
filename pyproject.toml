[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crackhash"
version = "0.1.0"
description = "Dictionary-based hash cracker for MD5, SHA-1 and SHA-256 digests"
requires-python = ">=3.10"
keywords = ["hash", "md5", "sha1", "sha256", "wordlist", "dictionary-attack"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Information Technology",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
]
dependencies = [
    "termcolor",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
crack-hash = "crackhash.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["crackhash"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
