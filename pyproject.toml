[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "assethttpd"
version = "0.1.0"
description = "A small threaded HTTP server that serves static files from a local directory on 127.0.0.1"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "server", "static", "files", "localhost"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
assethttpd = "assethttpd.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["assethttpd"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
