[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "marioforce"
version = "0.1.0"
description = "Input bruteforcer that perturbs joystick inputs to steer Mario toward a target state"
requires-python = ">=3.10"
dependencies = []
keywords = ["sm64", "tas", "bruteforce", "m64", "speedrun"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["marioforce"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
