[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ansikeys"
version = "0.1.0"
description = "Editor command registry with keyboard shortcuts, enable/check states and rebindable key bindings"
requires-python = ">=3.10"
dependencies = []
keywords = ["commands", "keybindings", "shortcuts", "menu", "editor", "ansi"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ansikeys"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 110
target-version = "py310"
