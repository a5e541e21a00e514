[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "undicht"
version = "0.1.0"
description = "Scene graph, skeletal animation and resource bookkeeping for a real-time 3D renderer"
requires-python = ">=3.10"
keywords = ["3d", "scene graph", "skeletal animation", "keyframes", "rendering"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["undicht"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
