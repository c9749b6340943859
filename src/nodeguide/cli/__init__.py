"""Command-line entrypoints for catalog and guide queries."""
