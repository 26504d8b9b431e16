"""A two-player desktop chess board with move-legality and check detection."""

__version__ = "0.1.0"
