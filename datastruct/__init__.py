"""Classic data structures and algorithms: containers, trees, bitmaps, hash tables and small recursive routines."""

__version__ = "0.1.0"