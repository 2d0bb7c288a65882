"""Spacebin - minimal text-paste storage service."""

__version__ = "0.1.0"
