[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crocsh"
version = "0.1.0"
description = "A small Unix shell with aliases, history, variables, pipes and redirections"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "command-line", "tcsh", "interpreter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
crocsh = "crocsh.session:main"

[tool.hatch.build.targets.wheel]
packages = ["crocsh"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
