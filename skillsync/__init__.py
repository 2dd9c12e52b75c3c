"""Keep AI tool skill directories linked to one shared skills source."""

__version__ = "0.1.0"
