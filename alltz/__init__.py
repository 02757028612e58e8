"""alltz - terminal timezone viewer."""

__version__ = "0.1.0"
