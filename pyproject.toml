[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bidijoin"
version = "0.1.0"
description = "Bidirectional text types, Arabic cursive joining, run lists and bidi mark removal"
requires-python = ">=3.10"
dependencies = []
keywords = ["bidi", "unicode", "arabic", "joining", "rtl", "text"]
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
    "Topic :: Text Processing :: Linguistic",
    "Topic :: Software Development :: Internationalization",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bidijoin"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
