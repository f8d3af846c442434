#! /usr/bin/env python


class DTDError(Exception):

    """Base error for pydtd exceptions

    None of these exceptions escape :func:`pydtd.parser.parse`, they are
    used to unwind the parser after a diagnostic has been recorded."""
    pass


class TokenizationError(DTDError):

    """Raised when a declaration cannot be split into tokens

    The exception's single argument is the reason, suitable for
    including in a diagnostic message."""

    def __init__(self, reason):
        super(TokenizationError, self).__init__(reason)
        self.reason = reason


class UndefinedEntityError(DTDError):

    """Raised when a parameter entity reference can't be resolved

    name
        The name of the undeclared parameter entity.

    text
        The text as it stood when the reference was found: references
        to the left of it have been expanded, the reference itself and
        everything after it are untouched."""

    def __init__(self, name, text):
        super(UndefinedEntityError, self).__init__(
            "parameter entity %r is not defined" % name)
        self.name = name
        self.text = text


class DeclarationError(DTDError):

    """Raised to abandon the declaration currently being parsed"""
    pass


class ScanHalted(DTDError):

    """Raised when the scanner can make no further progress"""
    pass
