[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coatshop"
version = "1.0.0"
description = "A small trench coat shop in the terminal: stock administration, a shopping basket, and CSV/HTML basket export"
requires-python = ">=3.10"
dependencies = []
keywords = ["shop", "inventory", "shopping-basket", "point-of-sale", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
coatshop = "coatshop.console:main"

[tool.hatch.build.targets.wheel]
packages = ["coatshop"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
