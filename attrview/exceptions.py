"""Library exceptions."""


class AttrViewException(Exception):
    """Attribute view exception."""


class ValueDecodeError(AttrViewException):
    """A cell value could not be decoded from its wire form."""

    def __init__(self, reason, errors=None):
        self.reason = reason
        self.errors = errors or []
        message = reason
        if self.errors:
            message += " (%d validation errors)" % len(self.errors)
        super().__init__(message)
