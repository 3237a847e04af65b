[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "palabrasclave"
version = "0.1.0"
description = "Interactive dictionary of C++ keywords in Spanish with a word-by-word code translator"
requires-python = ">=3.10"
dependencies = []
keywords = ["dictionary", "keywords", "translation", "education", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
palabrasclave = "palabrasclave.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["palabrasclave"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
