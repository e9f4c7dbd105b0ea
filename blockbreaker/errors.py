"""Exceptions raised outside the simulation core.

The simulation itself never raises: everything it receives is assumed to be
well formed.  These cover the start-up work around it.
"""


class BlockBreakerError(Exception):
    """Base class for all errors raised by the package."""


class ConfigError(BlockBreakerError):
    """Settings that cannot produce a playable game."""


class FontLoadError(BlockBreakerError):
    """The overlay font could not be loaded."""
