[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "autoslocos"
version = "0.1.0"
description = "A text-mode wacky races game: manage a garage of vehicles and race them on obstacle tracks."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "racing", "simulation", "terminal", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
autoslocos = "autoslocos.menus:main"

[tool.hatch.build.targets.wheel]
packages = ["autoslocos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
