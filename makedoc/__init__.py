"""Format tagged plain-text sources into fixed-width text documents."""

__version__ = "1.0.0"

__all__ = ["cli", "formatter", "tables", "text"]