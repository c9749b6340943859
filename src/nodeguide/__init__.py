"""Structured node catalogs extracted from tutorial pages."""

__version__ = "0.1.0"
