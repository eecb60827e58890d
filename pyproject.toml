[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "simplemsg"
version = "0.1.0"
description = "Binary message payloads and a connection interface for talking to industrial robot controllers"
requires-python = ">=3.10"
dependencies = []
keywords = ["robotics", "industrial", "serialization", "binary", "protocol"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Manufacturing",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: Scientific/Engineering :: Interface Engine/Protocol Translator",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["simplemsg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
