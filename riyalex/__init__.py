"""Lexer, token dump command and core library helpers for the Riya language."""

__version__ = "0.1.0"