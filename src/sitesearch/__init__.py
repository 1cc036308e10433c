"""Client-side style text search over a small pre-built page index."""

__version__ = "0.1.0"
