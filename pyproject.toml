[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voxelcraft"
version = "0.1.0"
description = "Voxel world engine core: chunked block storage, terrain generation, ray picking, movement physics and save files"
requires-python = ">=3.10"
keywords = ["voxel", "blocks", "chunks", "terrain", "game", "raycasting"]
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
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["voxelcraft"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
