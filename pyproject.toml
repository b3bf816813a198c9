[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tspgenetic"
version = "0.1.0"
description = "Island-model genetic algorithm with local search for the symmetric Euclidean travelling salesman problem"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "tsp",
    "travelling salesman",
    "genetic algorithm",
    "island model",
    "local search",
    "minimum spanning tree",
    "tsplib",
    "optimisation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tspgenetic = "tspgenetic.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tspgenetic"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
