"""Readers and geometry tools for classic first-person shooter maps, textures and sprites."""

__version__ = "0.1.0"