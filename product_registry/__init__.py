"""Product Registry - immutable product records with provenance metadata."""

__version__ = "0.1.0"
