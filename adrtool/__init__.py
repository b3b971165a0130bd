"""adrtool: Architecture Decision Record management."""

__version__ = "0.1.0"
