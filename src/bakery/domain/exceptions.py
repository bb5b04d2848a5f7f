"""Domain-level exceptions.

Everything the CLI needs to report is a subclass of DomainException so
each command can catch it uniformly and display a user-friendly message.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A model rule was violated."""


class DecodingError(DomainException):
    """A payload could not be decoded into an Order."""


class SubmissionError(DomainException):
    """Placing an order failed."""


class EncodingError(SubmissionError):
    """The order could not be serialized; nothing was sent."""


class NetworkError(SubmissionError):
    """No response was obtained from the order endpoint."""


class InvalidResponseError(SubmissionError):
    """A response arrived but its body is not an order."""

    def __init__(self, message: str, raw_body: str) -> None:
        super().__init__(message)
        self.raw_body = raw_body
