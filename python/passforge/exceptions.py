"""
Custom exceptions for Passforge.
"""


class PassforgeException(Exception):
    """Base exception for Passforge."""

    pass


class GenerationError(PassforgeException):
    """Password generation cannot proceed with the given options."""

    pass


class NoClassSelectedError(GenerationError):
    """No character class was selected."""

    def __init__(self, message: str = "Select at least one character class."):
        super().__init__(message)


class EmptyPoolError(GenerationError):
    """Every candidate character was filtered out."""

    def __init__(self, message: str = "No characters are left with the current options."):
        super().__init__(message)


class InvalidOptionsError(PassforgeException, ValueError):
    """Generation options are out of range."""

    pass


class ClipboardError(PassforgeException):
    """Clipboard operation failed."""

    pass


class NothingToCopyError(ClipboardError):
    """There are no passwords to copy."""

    def __init__(self, message: str = "Nothing to copy. Generate passwords first."):
        super().__init__(message)
