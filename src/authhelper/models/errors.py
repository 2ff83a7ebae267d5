class AuthHelperError(Exception):
    """Base class for errors raised inside the helper."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class EncodingError(AuthHelperError):
    """Raised when a request body cannot be encoded.

    ``response_message`` is the fixed text reported back to the caller; the
    instance message may carry more detail for the logs.
    """

    response_message = "Failed to encode body"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.response_message)


class JsonEncodingError(EncodingError):
    response_message = "Failed to encode JSON"


class FormEncodingError(EncodingError):
    """Raised when a body is not a flat JSON object of scalar values.

    Form bodies are produced by serializing the value to JSON and reading the
    top-level fields back as strings, so nested objects and arrays have no
    form representation.
    """

    response_message = "Failed to encode form data"


class TokenError(AuthHelperError):
    """Raised by identity providers when a token cannot be issued."""


class TokenExpiredError(TokenError):
    def __init__(self, subject: str | None = None):
        self.subject = subject
        who = f" for '{subject}'" if subject else ""
        super().__init__(f"Access token{who} has expired")
