"""Text layout: position glyphs from styled text sections within bounds."""

__version__ = "0.1.0"