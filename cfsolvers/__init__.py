"""Solvers for short competitive-programming problems, as functions and a command line."""

__version__ = "0.1.0"
__all__ = ["basic", "constructive", "intermediate", "advanced", "cli"]