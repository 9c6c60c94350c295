[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tilesrv"
version = "0.1.0"
description = "Configuration parsing, HTTP request handling and INSPIRE compliance checks for a WMS/WMTS/TMS tile server"
requires-python = ">=3.10"
dependencies = []
keywords = ["wms", "wmts", "tms", "tiles", "inspire", "ogc", "gis", "configuration"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
    "Topic :: Internet :: WWW/HTTP",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tilesrv"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
