"""Vade Mecum core: legal corpus navigation and priority ordering."""

__version__ = "0.1.0"
