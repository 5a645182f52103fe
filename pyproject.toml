[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "booklib"
version = "1.0.0"
description = "A small lending library of books and users, with a console walkthrough and a Tk window"
requires-python = ">=3.10"
dependencies = []
keywords = ["library", "books", "lending", "catalogue", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
booklib = "booklib.demo:main"

[tool.setuptools.packages.find]
include = ["booklib*"]

[tool.pytest.ini_options]
addopts = "-ra"
