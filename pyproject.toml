[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "localkit"
version = "0.1.0"
description = "Small utility toolkit: ANSI styling, string helpers, hash map, vector, linked list, .env loading and HTTP message parsing"
requires-python = ">=3.10"
dependencies = []
keywords = ["strings", "hashmap", "dotenv", "http", "parser", "utilities"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["localkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
