"""Exception types raised by fakevasp."""


class FakeVaspError(Exception):
    """Base class for fakevasp errors."""


class ConfigurationError(FakeVaspError):
    """Raised when a required setting is missing."""


class SessionError(FakeVaspError):
    """Raised when an interactive child process cannot be driven."""
