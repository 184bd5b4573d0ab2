"""vidcat - flat-text video metadata catalog with a derived HTML report."""

__version__ = "0.1.0"
