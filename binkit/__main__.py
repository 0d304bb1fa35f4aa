"""
Entry point for running binkit CLI as a module.

Usage: python -m binkit [command] [args]
"""

from binkit.cli.parser import main

if __name__ == "__main__":
    main()
