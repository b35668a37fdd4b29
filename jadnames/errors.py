from __future__ import annotations


class JadNamesError(Exception):
    pass


class DescriptorError(JadNamesError, ValueError):
    """
    Raised when a method descriptor cannot be parsed.
    """


class NamingContextError(JadNamesError):
    """
    Raised when naming scopes are linked in a way that cannot be honored.
    """
