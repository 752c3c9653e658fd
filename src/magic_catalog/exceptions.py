"""Custom exceptions for Magic Catalog."""


class MagicCatalogError(Exception):
    """Base exception for all Magic Catalog errors."""


class CatalogIOError(MagicCatalogError):
    """Exception raised when a catalog file cannot be read or written."""


class DeserializationError(MagicCatalogError):
    """Exception raised when stored bytes do not decode into a valid catalog."""


class ConfigurationError(MagicCatalogError):
    """Exception raised for configuration related errors."""


class ValidationError(MagicCatalogError):
    """Exception raised for data validation errors."""
