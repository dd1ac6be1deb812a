[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gostudy"
version = "0.1.0"
description = "Small algorithm exercises: base conversion, factoring, Fibonacci, GCD, simple sorts and Big O examples"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "sorting", "base-conversion", "gcd", "fibonacci", "exercises"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gostudy-gcd = "gostudy.gcd_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["gostudy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
