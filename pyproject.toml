[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "s100fc"
version = "0.1.0"
description = "Reader for S-100 feature catalogues: feature, information and attribute definitions with their bindings."
requires-python = ">=3.10"
dependencies = []
keywords = ["S-100", "feature catalogue", "hydrography", "IHO", "XML"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
    "Topic :: Text Processing :: Markup :: XML",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["s100fc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
