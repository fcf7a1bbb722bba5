[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fluchooser"
version = "0.1.0"
description = "Toolkit-independent file chooser logic, menu lookup and progress tracking"
requires-python = ">=3.10"
dependencies = []
keywords = ["file chooser", "glob", "file dialog", "progress", "menu"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fluchooser"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
