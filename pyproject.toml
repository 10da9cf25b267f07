[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "filesys"
version = "0.1.0"
description = "File status queries, filesystem operations, directory iteration and unique path generation"
requires-python = ">=3.10"
dependencies = []
keywords = ["filesystem", "path", "directory", "status", "permissions", "unique-path"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["filesys"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
