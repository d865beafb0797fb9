[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ftprintf"
version = "1.0.0"
description = "A small printf-style formatter supporting %c, %s, %p, %d, %i, %u, %x, %X and %%"
requires-python = ">=3.10"
dependencies = []
keywords = ["printf", "format", "formatting", "string"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ftprintf-demo = "ftprintf.demo:main"
ftprintf-exam = "ftprintf.exam:main"

[tool.hatch.build.targets.wheel]
packages = ["ftprintf"]

[tool.pytest.ini_options]
addopts = "-ra"
