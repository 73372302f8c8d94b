[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raytracer"
version = "0.1.0"
description = "A small path-tracing renderer for spheres with diffuse, metallic and glass materials, writing 24-bit BMP images."
requires-python = ">=3.10"
dependencies = []
keywords = ["ray tracing", "path tracing", "rendering", "bmp", "graphics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
raytracer = "raytracer.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["raytracer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
