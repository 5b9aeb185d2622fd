"""
Error taxonomy for label parsing.

Every error carries the HTTP status class it maps to. Request and domain
errors (4xx) have user-facing messages; the 5xx errors are logged and the
caller only ever sees a generic message.
"""

from typing import Optional


class ParseError(Exception):
    """Base class for failures while parsing an ingredient label."""

    status_code = 500
    user_facing = False


# =============================================================================
# CLIENT-FACING (400)
# =============================================================================


class MissingImageError(ParseError):
    """No image bytes were supplied."""

    status_code = 400
    user_facing = True


class UnsupportedImageTypeError(ParseError):
    """Image type is not one the model endpoint accepts."""

    status_code = 400
    user_facing = True


class InvalidImageError(ParseError):
    """Upload could not be decoded as an image."""

    status_code = 400
    user_facing = True


class IngredientLabelError(ParseError):
    """The model reported a content-level problem with the label (blurry, cut off, ...)."""

    status_code = 400
    user_facing = True


# =============================================================================
# SERVER-FACING (500)
# =============================================================================


class ConfigurationError(ParseError):
    """Required configuration (the API key) is missing."""

    pass


class UpstreamError(ParseError):
    """The model API failed or answered with something that is not a reply envelope."""

    def __init__(
        self,
        message: str,
        upstream_status: Optional[int] = None,
        body: Optional[str] = None,
    ):
        super().__init__(message)
        self.upstream_status = upstream_status
        self.body = body


class UpstreamTimeoutError(UpstreamError):
    """The model API did not answer within the configured timeout."""

    pass


class ContractViolationError(ParseError):
    """The model ignored the response format on both attempts."""

    pass
