[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voidengine"
version = "0.1.0"
description = "Game engine core: allocators over a simulated address space, containers, input events and a reference-counted resource cache"
requires-python = ">=3.10"
dependencies = []
keywords = ["game-engine", "allocator", "hash-map", "robin-hood", "resource-cache", "events"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["voidengine"]

[tool.pytest.ini_options]
addopts = "-ra"
