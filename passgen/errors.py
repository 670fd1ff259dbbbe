"""
passgen.errors
Exceptions raised by the generator and its configuration layer.
"""


class PassgenError(Exception):
    """Base class for every error passgen raises on purpose."""


class InvalidLengthError(PassgenError, ValueError):
    def __init__(self, length=None):
        msg = "length must be greater than 0"
        if length is not None:
            msg = f"{msg} (got {length})"
        super().__init__(msg)
        self.length = length


class NoCategoriesError(PassgenError, ValueError):
    def __init__(self):
        super().__init__("no character categories selected")


class EntropyError(PassgenError, RuntimeError):
    """
    The entropy source could not produce a value.
    The underlying exception, if any, is available as __cause__.
    """


class ConfigError(PassgenError, ValueError):
    """Invalid construction-time option or persisted setting."""
