[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "distract"
version = "0.1.0"
description = "A small 2D game framework on pygame: scenes, entities, resources, input, animation and sound"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "framework", "2d", "scene", "entity", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["distract"]

[tool.pytest.ini_options]
addopts = "-ra"
