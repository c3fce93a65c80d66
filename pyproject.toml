[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sampler"
version = "0.1.0"
description = "A collection of small, self-contained command-line tools and library helpers for text, numbers, images, HTTP and structured data."
requires-python = ">=3.10"
keywords = [
    "echo",
    "palindrome",
    "s-expression",
    "deep-equality",
    "mandelbrot",
    "lissajous",
    "bzip2",
    "temperature",
    "popcount",
]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing :: Filters",
    "Topic :: Utilities",
]
dependencies = [
    "pillow",
    "jinja2",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sampler-echo = "sampler.echo:main"
sampler-dup = "sampler.dup:main"
sampler-textutil = "sampler.textutil:main"
sampler-cf = "sampler.tempconv:main"
sampler-netflag = "sampler.netflag:main"
sampler-charcount = "sampler.charcount:main"
sampler-sha256 = "sampler.digest:main"
sampler-movie = "sampler.movie:main"
sampler-lissajous = "sampler.lissajous:main"
sampler-mandelbrot = "sampler.mandelbrot:main"
sampler-surface = "sampler.surface:main"
sampler-jpeg = "sampler.jpeg:main"
sampler-fetch = "sampler.fetch:main"
sampler-fetchall = "sampler.fetch:main_all"
sampler-server = "sampler.servers:main"
sampler-search = "sampler.params:main"
sampler-issues = "sampler.issues:main"
sampler-bzip = "sampler.bzip:main"

[tool.hatch.build.targets.wheel]
packages = ["sampler"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
