"""confctl - Read, change, and migrate stored configuration objects."""

__version__ = "0.1.0"
