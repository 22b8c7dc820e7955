[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "thompson_nfa"
version = "0.1.0"
description = "Regular expression matching with Thompson's NFA construction"
requires-python = ">=3.10"
dependencies = []
keywords = ["regex", "regular-expression", "nfa", "thompson", "automata"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
thompson-nfa = "thompson_nfa.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["thompson_nfa"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
