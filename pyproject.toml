[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tuxjump"
version = "0.1.0"
description = "Core logic of a side-scrolling jump'n'run game: s-expression data files, pattern matching, physics, sprites, particles and menus"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "platformer", "s-expression", "lisp", "menu", "physics", "particles"]
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
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tuxjump"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
