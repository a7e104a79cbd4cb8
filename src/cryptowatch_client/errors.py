"""Exceptions raised by the Cryptowatch client."""


class CryptowatchError(Exception):
    """Base class for every error raised by this package."""


class TransportError(CryptowatchError, ConnectionError):
    """The request could not be sent or the response body could not be read."""


class DecodeError(CryptowatchError, ValueError):
    """The response body or its `result` payload has an unexpected shape."""


class RateLimitError(CryptowatchError):
    """The API answered 429 Too Many Requests.

    Attributes:
        reset_minutes: Approximate number of minutes until the allowance resets.
    """

    def __init__(self, reset_minutes: int) -> None:
        self.reset_minutes = reset_minutes
        super().__init__(
            f"Too Many Requests. Allowance resets in {reset_minutes} minutes."
        )


class APIError(CryptowatchError):
    """The API answered with a non-200 status and an error envelope.

    Attributes:
        status_code: HTTP status code of the response.
        message: Error message taken from the envelope.
    """

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)
