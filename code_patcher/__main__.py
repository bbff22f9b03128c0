"""
Main entry point for the code_patcher package.

When run as `python -m code_patcher`, it starts the command-line interface.
"""

from code_patcher.cli import main

if __name__ == "__main__":
    main()
