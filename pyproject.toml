[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pipeshell"
version = "0.1.0"
description = "A small pipeline runner: commands, pipes, redirections and here-documents taken from argv."
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "pipeline", "redirection", "heredoc", "subprocess"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
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
pipeshell = "pipeshell.executor:main"
pipeshell-prompt = "pipeshell.prompt:main"

[tool.hatch.build.targets.wheel]
packages = ["pipeshell"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
