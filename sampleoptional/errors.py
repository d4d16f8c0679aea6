class OptionError(Exception):
    pass


class NullValueError(OptionError, ValueError):
    """Raised when a present Option is built around ``None``."""


class NoSuchValueError(OptionError, LookupError):
    """Raised when the value of an empty Option is requested."""
