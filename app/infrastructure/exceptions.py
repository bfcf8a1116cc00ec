"""Exceptions shared across infrastructure packages."""


class ConfigurationError(Exception):
    """Raised at setup time when the application is misconfigured.

    Configuration errors abort startup instead of failing per request.
    """
