[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "httpprobe"
version = "1.0.0"
description = "Send simple HTTP requests and print status, body and per-event transfer traces."
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "client", "debug", "trace", "rest", "probe"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
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
httpprobe = "httpprobe.client:main"
httpprobe-debug = "httpprobe.debug:main"

[tool.hatch.build.targets.wheel]
packages = ["httpprobe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
