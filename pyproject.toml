[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "echoalchemist"
version = "0.1.0"
description = "Procedural monster generation: seeded attributes, palettes, appearance assembly, shapes, walk cycles and wave function collapse."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "procedural generation",
    "pcg",
    "monsters",
    "palette",
    "cellular automata",
    "perlin noise",
    "voronoi",
    "wave function collapse",
    "game",
]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["echoalchemist"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
