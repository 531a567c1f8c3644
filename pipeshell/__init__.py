"""Run pipelines of programs with pipes, redirections and here-documents."""

__version__ = "0.1.0"