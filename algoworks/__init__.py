"""Classic algorithms and data structures with runnable demonstrations."""

__version__ = "0.1.0"