"""Domain-specific exceptions for clean error handling."""


class ConfigurationError(RuntimeError):
    """Raised when runtime configuration is invalid or missing."""


class CatalogError(ValueError):
    """Raised when an error catalog is built from inconsistent entries."""
