[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quadplay"
version = "0.1.0"
description = "Headless game logic: tile-based platformer physics, particle emitters and small arcade game simulations"
requires-python = ">=3.10"
dependencies = []
keywords = ["games", "physics", "platformer", "particles", "simulation", "game-of-life", "snake", "asteroids", "arkanoid"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["quadplay"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
