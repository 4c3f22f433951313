class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid."""


class CatalogLoadError(Exception):
    """Raised when a catalog cannot be loaded or initialized."""


class CommandError(Exception):
    """Raised for invalid manage.py commands."""


class StoreError(Exception):
    """Raised when the catalog store cannot be reached or queried."""
