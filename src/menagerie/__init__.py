"""menagerie: interactive name/species/age record collector."""

__version__ = "0.1.0"
