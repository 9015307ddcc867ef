[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fishcore"
version = "0.1.0"
description = "Core building blocks for a 2D side-scrolling arcade game: configuration, input mapping, geometry, noise, serialization helpers and networking types."
requires-python = ">=3.11"
keywords = ["game", "2d", "platformer", "input", "perlin", "config", "ecs"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "tomli-w",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["fishcore"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
