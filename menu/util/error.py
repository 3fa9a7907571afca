"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Settings are unusable for the current environment.

    Raised at startup, e.g. when production still uses the default token
    secret.
    """

    pass


class DependencyInjectionError(UtilError):
    """No provider implementation matches the requested component."""

    pass
