"""Simulated-shell building blocks: command-line parsing, an in-memory file system, commands and line editing."""

__version__ = "0.1.0"