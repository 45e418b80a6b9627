[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sandsnake"
version = "1.0.0"
description = "A classic snake arcade game with a sandy palette, music and a persistent high score."
requires-python = ">=3.10"
keywords = ["snake", "game", "arcade", "pygame"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
    "platformdirs",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sandsnake = "sandsnake.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sandsnake"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
