"""
Entry point for running NDKKit CLI as a module.

Usage: python -m ndkkit [command] [options]
"""

from ndkkit.cli.parser import main

if __name__ == "__main__":
    main()
