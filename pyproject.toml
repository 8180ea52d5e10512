[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "procsys"
version = "0.1.0"
description = "Read system and process statistics from the Linux /proc filesystem"
requires-python = ">=3.10"
dependencies = []
keywords = ["proc", "procfs", "linux", "metrics", "monitoring", "system"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["procsys"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
