[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "acheron"
version = "0.1.0"
description = "A small entity-component-system framework with staged systems, singletons and modules"
requires-python = ">=3.10"
dependencies = []
keywords = ["ecs", "entity-component-system", "game", "framework", "gamedev"]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
acheron-examples = "acheron.examples:main"

[tool.hatch.build.targets.wheel]
packages = ["acheron"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
