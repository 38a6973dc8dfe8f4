"""Small teaching programs: ciphers, fruit-salad collections, graphs, concurrency and CSV handling."""

__version__ = "0.1.0"