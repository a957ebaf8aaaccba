[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "braillegraph"
version = "0.23.0"
description = "Draw graphs in the terminal using braille, block, quadrant and octant characters"
requires-python = ">=3.10"
dependencies = []
keywords = ["braille", "graph", "terminal", "plot", "unicode", "blocks", "chart"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
    "Topic :: Terminals",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
braillegraph-rose = "braillegraph.rose:main"

[tool.hatch.build.targets.wheel]
packages = ["braillegraph"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
