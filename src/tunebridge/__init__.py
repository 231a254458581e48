"""tunebridge - cross-platform music link and metadata resolver."""

__version__ = "0.1.0"
