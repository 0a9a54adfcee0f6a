"""Custom exception hierarchy for property-finder."""


class PropertyFinderError(Exception):
    """Base exception for all property-finder errors."""


class CatalogError(PropertyFinderError):
    """Base exception for catalog construction and access errors."""


class CatalogLoadError(CatalogError):
    """Raised when a catalog file cannot be read or parsed."""


class DuplicatePropertyError(CatalogError):
    """Raised when two catalog records share the same id."""


class PropertyNotFoundError(CatalogError):
    """Raised when a referenced property does not exist."""


class ConfigurationError(PropertyFinderError):
    """Raised when configuration is invalid or missing."""
