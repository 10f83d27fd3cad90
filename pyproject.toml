[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "algocourse"
version = "1.0.0"
description = "Classic introductory algorithms and data structures: searching, sorting, stacks, queues, linked lists, the Game of Life, Monte Carlo pi and simple PGM image filters."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data structures",
    "sorting",
    "searching",
    "linked list",
    "game of life",
    "monte carlo",
    "pgm",
]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algocourse-pi = "algocourse.montecarlo:main"
algocourse-life = "algocourse.life:main"
algocourse-iris = "algocourse.iris:main"
algocourse-pgm = "algocourse.pgm:main"

[tool.setuptools.packages.find]
include = ["algocourse*"]

[tool.pytest.ini_options]
addopts = "-ra"
