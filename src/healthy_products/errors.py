class HealthyProductsError(Exception):
    """Base exception for the Healthy Products game."""


class ConfigurationError(HealthyProductsError):
    """Raised when game rules or settings are malformed.

    Detected eagerly, before any level is started.
    """


class AssetLoadError(HealthyProductsError):
    """Raised by the renderer when a texture cannot be loaded."""
