"""palette-kit — Extract a five-colour theme palette from an image."""

__version__ = '0.3.0'
