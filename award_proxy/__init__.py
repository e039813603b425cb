"""USAspending award search proxy."""

__version__ = "0.1.0"
