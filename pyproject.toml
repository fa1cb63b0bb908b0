[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "maple_engine"
version = "0.1.0"
description = "Vector, matrix, quaternion, camera, lighting and input-state helpers for a small 3D engine"
requires-python = ">=3.10"
dependencies = []
keywords = ["3d", "math", "vector", "matrix", "quaternion", "lighting", "camera", "input"]
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
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["maple_engine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
