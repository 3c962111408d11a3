"""Valentine link tracking and e-card API."""

__version__ = "0.1.0"
