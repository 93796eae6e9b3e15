"""
Custom domain exceptions for the listing pipeline.
Field extraction never raises; these cover the boundaries around it.
"""


class ConfigError(Exception):
    """Raised when required configuration is missing or invalid."""
    pass


class DataContractError(Exception):
    """Raised when an incoming payload doesn't have the listing fragment shape."""
    pass

