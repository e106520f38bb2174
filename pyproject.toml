[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trendwords"
version = "0.1.0"
description = "A small feed-forward neural network that learns which words are trending"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["neural-network", "classification", "words", "trends", "adam"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Natural Language :: English",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
trendwords-train = "trendwords.cli:main"
trendwords-trends = "trendwords.cli:trends_main"

[tool.hatch.build.targets.wheel]
packages = ["trendwords"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
