"""Version of homefs."""

__version__ = "0.1.0"
