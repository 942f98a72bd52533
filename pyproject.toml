[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ssrclient"
version = "0.1.0"
description = "Command-line client that retrieves and consolidates SSR entries across target environments"
requires-python = ">=3.10"
dependencies = []
keywords = ["ssr", "service registry", "cli", "environments"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ssr-client = "ssrclient.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ssrclient"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
