"""
minic Command-Line Interface
============================

- **mclex**: tokenize a source file and print the tokens

Each tool is a Click-based CLI application.
"""

__all__ = ["mclex"]
