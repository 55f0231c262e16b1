"""A small Unix shell with aliases, history, variables, pipes and redirections."""

__version__ = "0.1.0"