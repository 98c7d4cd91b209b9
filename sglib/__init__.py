"""In-place sorting algorithms, test-data generators, a scoped timer and a shared logger."""

__version__ = "0.1.0"