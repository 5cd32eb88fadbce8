"""Turn-based chess rules engine with capture tracking."""

__version__ = "0.1.0"
