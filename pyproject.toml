[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cipherbox"
version = "0.1.0"
description = "Interactive console tool for XOR, Beaufort and Twofish-CFB encryption of files and text"
requires-python = ">=3.10"
dependencies = []
keywords = ["encryption", "xor", "beaufort", "twofish", "cfb", "cipher"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Russian",
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
cipherbox = "cipherbox.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cipherbox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
