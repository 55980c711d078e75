"""Main entry point when executing sportmonks_sdk as a package.

This allows running the package using python -m sportmonks_sdk.
"""

from sportmonks_sdk.main import cli_entry_point

if __name__ == "__main__":
    cli_entry_point()
