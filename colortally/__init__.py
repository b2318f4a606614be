"""Top-3 dominant colour extraction for batches of image URLs."""

__version__ = "0.1.0"
