"""Derive complete 22-color terminal themes from 10 base colors."""

__version__ = "0.1.0"
