[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ecfmp"
version = "0.1.0"
description = "Flight information region model for flow management data"
requires-python = ">=3.10"
keywords = ["aviation", "flow management", "fir", "air traffic control"]
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
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ecfmp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
