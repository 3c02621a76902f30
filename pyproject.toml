[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tagwatch"
version = "0.1.0"
description = "Belongings watcher: decodes SLIP-framed RFID tag frames, keeps a tag registry and drives a dial-style screen flow"
requires-python = ">=3.10"
dependencies = []
keywords = ["rfid", "slip", "tags", "home-automation", "state-machine"]
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
    "Topic :: Home Automation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tagwatch"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
