"""Main entry point when executing routectl as a package.

This allows running the package using python -m routectl.
"""

from routectl.main import cli_entry_point

if __name__ == "__main__":
    cli_entry_point()
