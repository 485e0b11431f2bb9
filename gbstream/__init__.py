"""Media server API client and host statistics for video platforms."""

__version__ = "0.1.0"