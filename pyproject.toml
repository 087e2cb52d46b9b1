[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zeldo"
version = "0.1.0"
description = "The Legend of Zeldo: a small top-down action role-playing game"
requires-python = ">=3.10"
keywords = ["game", "rpg", "pygame", "adventure"]
classifiers = [
    "Development Status :: 4 - Beta",
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
zeldo = "zeldo.app:main"

[tool.hatch.build.targets.wheel]
packages = ["zeldo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
