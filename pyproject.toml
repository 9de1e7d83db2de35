[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rkcapture"
version = "0.1.0"
description = "Command-line handling, error codes and encoder parameter types for a video capture service"
requires-python = ">=3.10"
dependencies = []
keywords = ["video", "capture", "encoder", "h264", "h265", "rate-control", "command-line"]
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
    "Topic :: Multimedia :: Video :: Capture",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rkcapture"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
