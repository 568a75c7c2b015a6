[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taskbook"
version = "0.1.0"
description = "An interactive console collection of algorithm exercises, data structures and probability modelling tasks"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "exercises",
    "avl-tree",
    "binary-search-tree",
    "markov-chain",
    "fibonacci",
    "pisano-period",
    "stock-span",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
taskbook = "taskbook.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["taskbook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
