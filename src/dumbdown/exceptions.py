"""Custom exceptions for dumbdown."""


class DumbdownError(Exception):
    """Base exception for dumbdown operations."""


class InvalidInputError(DumbdownError):
    """Input is not a string."""


class ConversionError(DumbdownError):
    """Error while parsing, normalizing, or serializing a document.

    Always raised ``from`` the originating exception, which stays available
    as ``__cause__``.
    """
