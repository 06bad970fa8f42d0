"""Game server building blocks: sorting algorithms, byte-string helpers, a timer wheel and a cached thread pool."""

__version__ = "1.0.0"