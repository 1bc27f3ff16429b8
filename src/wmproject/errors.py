"""Exceptions raised by the project file codec."""


class MalformedDocumentError(ValueError):
    """The project document is not well-formed XML."""
