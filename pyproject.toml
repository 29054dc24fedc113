[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "debtext"
version = "0.1.0"
description = "Parse and write deb822 control files, DEP-5 copyright files and DEP-3 patch headers"
requires-python = ">=3.10"
dependencies = []
keywords = ["deb822", "debian", "dep5", "dep3", "copyright", "control", "parser"]
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
    "Topic :: Text Processing :: General",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["debtext"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
