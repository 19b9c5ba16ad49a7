"""Errors raised while issuing tokens."""

from jose.exceptions import JOSEError

# Errors from the signing step are python-jose's own and reach callers unchanged
SigningFailure = JOSEError


class MissingRequiredField(ValueError):
    """A required field of a client token request was empty."""

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        super().__init__(message or f"missing {field}")
