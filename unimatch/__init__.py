"""unimatch - backend core for a university-student dating app."""

__version__ = "1.0.0"
