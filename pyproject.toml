[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "remml"
version = "0.1.0"
description = "Render a small subset of MathML presentation elements to raster images"
requires-python = ">=3.10"
dependencies = [
    "pillow>=10.1",
]
keywords = ["mathml", "math", "rendering", "typesetting", "image"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["remml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
