"""Exceptions raised by the relay subsystem."""


class RelayError(Exception):
    """Base class for relay errors."""


class ConfigurationError(RelayError, ValueError):
    """The environment does not describe a runnable bot. Fatal at startup."""


class MissingCredentialError(ConfigurationError):
    """A required secret is absent from the environment."""


class QuoteFetchError(RelayError):
    """The quote API was unreachable, answered non-2xx, or sent an unexpected payload."""
