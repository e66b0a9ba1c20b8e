[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mygl2d"
version = "0.1.0"
description = "A small 2D drawing toolkit on pygame with TGA loading, sprite animation and a mouse demo game"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["2d", "graphics", "tga", "targa", "sprites", "animation", "pygame", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mygl2d = "mygl2d.game:main"

[tool.hatch.build.targets.wheel]
packages = ["mygl2d"]

[tool.pytest.ini_options]
addopts = "-ra"
