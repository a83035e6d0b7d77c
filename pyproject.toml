[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "toolchest"
version = "0.1.0"
description = "Small command-line utilities, classic ciphers, a JSON model and design-pattern examples"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "hexdump",
    "bloom-filter",
    "spellcheck",
    "json",
    "cipher",
    "design-patterns",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cxxd = "toolchest.hexdump:main"
fc = "toolchest.filecount:main"
spellcheck = "toolchest.spellcheck:main"
validate-json = "toolchest.jsontools:main"
rot-cipher = "toolchest.rot:main"
vigenere-cipher = "toolchest.vigenere:main"
crack-archive = "toolchest.crack:main"

[tool.setuptools.packages.find]
include = ["toolchest", "toolchest.*"]

[tool.pytest.ini_options]
addopts = "-ra"
