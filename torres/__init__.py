"""Towers of Hanoi for the terminal, with console colour helpers and tic-tac-toe board checks."""

__version__ = "1.0.0"