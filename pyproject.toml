[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hellodemo"
version = "0.0.1"
description = "A small command that prints a greeting"
requires-python = ">=3.10"
dependencies = []
keywords = ["greeting", "hello", "example", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hellodemo = "hellodemo.greeting:main"

[tool.hatch.build.targets.wheel]
packages = ["hellodemo"]

[tool.pytest.ini_options]
addopts = "-ra"
