"""Main module for the semantic_pen command-line tool.

This module allows the CLI to be run as a Python module using:
python -m semantic_pen

It delegates to the CLI application's main function.
"""

from semantic_pen.cli.app import main

if __name__ == "__main__":
    main()
