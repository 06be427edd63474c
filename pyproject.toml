[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rasterkit"
version = "0.1.0"
description = "Software rasterisation toolkit: TGA images, line and circle drawing, anti-aliasing, OBJ rendering and colour model conversions"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "tga",
    "rasterization",
    "bresenham",
    "dda",
    "anti-aliasing",
    "wavefront-obj",
    "color-conversion",
    "computer-graphics",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rasterkit = "rasterkit.cli:main"
rasterkit-colors = "rasterkit.colors:main"

[tool.hatch.build.targets.wheel]
packages = ["rasterkit"]

[tool.hatch.build.targets.sdist]
include = ["rasterkit", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
