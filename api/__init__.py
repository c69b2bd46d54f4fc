"""HTTP API for the AEO assessment engine."""

__version__ = "2.0.0"
