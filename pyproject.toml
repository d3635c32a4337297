[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tikzkit"
version = "2.1.7"
description = "Core helpers for a TikZ diagram editor: geometry, named colours, canvas grid and zoom, editing tools and update checks"
requires-python = ">=3.10"
dependencies = []
keywords = ["tikz", "latex", "diagram", "editor", "xcolor", "bezier"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Multimedia :: Graphics :: Editors :: Vector-Based",
    "Topic :: Text Processing :: Markup :: LaTeX",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tikzkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
