[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "cpusched"
version = "0.1.0"
description = "CPU scheduling simulator with Gantt charts for classic, queue-based and I/O-aware algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = ["scheduling", "cpu", "operating-systems", "gantt", "simulation", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools]
packages = ["cpusched"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
