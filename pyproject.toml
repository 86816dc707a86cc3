[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "routewalker"
version = "0.1.0"
description = "A small tile-based overworld adventure with random encounters, potions and obfuscated save files"
requires-python = ">=3.10"
keywords = ["game", "rpg", "tile map", "pygame", "overworld"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
routewalker = "routewalker.app:main"
routewalker-editor = "routewalker.editor:main"
routewalker-encrypt = "routewalker.encryptor:main"

[tool.hatch.build.targets.wheel]
packages = ["routewalker"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
