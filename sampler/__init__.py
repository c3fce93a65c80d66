"""Small, self-contained tools for text, numbers, images, HTTP and structured data."""

__version__ = "0.1.0"