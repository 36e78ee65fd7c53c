"""Solvers for small competitive-programming problems, as functions and commands."""

__version__ = "0.1.0"