[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "valkyrion"
version = "0.1.0"
description = "A small game engine core: an entity-component-system coordinator, logging and a pygame application loop"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game engine", "ecs", "entity component system", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
valkyrion-sandbox = "valkyrion.sandbox:main"

[tool.hatch.build.targets.wheel]
packages = ["valkyrion"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
