"""Errors raised while loading the health data document."""


class LoadError(Exception):
    """The document could not be fetched, read or parsed."""


class DocumentValidationError(LoadError):
    """The document parsed but its structure is not usable."""
