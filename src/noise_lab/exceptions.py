"""
Exception types raised at the configuration and collaborator boundaries.

The simulation core itself is total over valid inputs and raises nothing;
these are only raised while validating what the caller hands in, or by
the optional insights client.
"""


class InvalidConfigurationError(ValueError):
    """Qubit count, gate placement or noise parameter outside the supported range."""


class InsightsError(RuntimeError):
    """The external insights service could not produce a usable answer."""
