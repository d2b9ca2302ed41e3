"""Per-domain site and admin theme assignment for multi-domain deployments."""

__version__ = "0.1.0"
