[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kernutil"
version = "0.1.0"
description = "Small kernel-support data structures: bitmaps, plain and sorted lists, hash tables, debug flags and host-system helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["bitmap", "list", "sorted list", "hash table", "debugging", "operating systems"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
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

[project.scripts]
kernutil-selftest = "kernutil.libtest:main"

[tool.hatch.build.targets.wheel]
packages = ["kernutil"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
