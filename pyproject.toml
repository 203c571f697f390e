[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mercha"
version = "0.1.0"
description = "ChaCha20 keystream encryption folded into a 64-byte Merkle-tree digest, with commands to generate and check test data."
requires-python = ">=3.10"
dependencies = []
keywords = ["chacha20", "merkle", "hash", "digest", "stream-cipher"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mercha-check = "mercha.runner:main"
mercha-generate = "mercha.generator:main"

[tool.hatch.build.targets.wheel]
packages = ["mercha"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
