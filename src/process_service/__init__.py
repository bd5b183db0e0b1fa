"""Flora and fauna enforcement process service."""

__version__ = "0.1.0"
