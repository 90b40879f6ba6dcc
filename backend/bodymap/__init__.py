"""BodyMap — anatomical body highlighter."""

__version__ = "0.1.0"
