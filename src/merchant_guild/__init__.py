"""Merchant guild trading game: market and event simulation engine"""

__version__ = "0.1.0"
