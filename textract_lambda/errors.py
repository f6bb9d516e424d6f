"""Failures the handler maps onto its error response."""


class TextractLambdaError(Exception):
    """Base class for every failure the handler reports to the caller."""


class InputError(TextractLambdaError):
    """Malformed request body, missing field, or unrecognised S3 URL."""


class CapabilityError(TextractLambdaError):
    """Textract could not be called or rejected the request."""


class SerializationError(TextractLambdaError):
    """The response body could not be encoded as JSON."""
