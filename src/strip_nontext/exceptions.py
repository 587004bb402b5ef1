"""Custom exceptions for strip_nontext."""


class StripNontextError(Exception):
    """Base exception for strip_nontext operations."""


class DocumentError(StripNontextError):
    """Input tree could not be validated into document nodes."""
