"""Version information for neo-upload."""

__version__ = "0.1.0"
