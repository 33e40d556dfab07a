"""SPARC Scaffolder - turns feature descriptions into SPARC documentation bundles."""

__version__ = "1.0.0"
