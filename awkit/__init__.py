"""Activity event models and transforms, and bucket syncing between stores."""

__version__ = "0.1.0"