"""
Main entry point for the dpkg_builder package.

Allows running the tool as: python -m dpkg_builder
"""

from dpkg_builder.cli import main

if __name__ == "__main__":
    main()
