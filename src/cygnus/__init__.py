"""Cygnus - derived attributes for fifth-edition-style tabletop characters."""

__version__ = "0.1.0"
