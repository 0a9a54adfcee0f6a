"""Natural-language property search over an in-memory catalog."""

__version__ = "0.1.0"
