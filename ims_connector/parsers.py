"""
Response decoding for the IMS API.

Each parser takes the raw response body and returns typed models, raising
DecodeError (or FatalDecodeError for the login response) when the body is
not the expected JSON shape.
"""

import logging

from pydantic import TypeAdapter, ValidationError

from ims_connector.errors import DecodeError, FatalDecodeError
from ims_connector.models import Asset, AuthenticationResult

logger = logging.getLogger(__name__)

_ASSET_LIST = TypeAdapter(list[Asset])


def _preview(body: bytes, limit: int = 200) -> str:
    return body[:limit].decode("utf-8", errors="replace")


def parse_authentication_response(body: bytes) -> AuthenticationResult:
    """Decode a login response body.

    Args:
        body: Raw response body

    Returns:
        AuthenticationResult (empty key when the login was rejected)

    Raises:
        FatalDecodeError: If the body is not a JSON object of the login shape
    """
    try:
        return AuthenticationResult.model_validate_json(body)
    except ValidationError as e:
        logger.error(f"Unreadable login response: {e.error_count()} error(s)")
        raise FatalDecodeError(
            f"Login response could not be decoded: {e}",
            response_data=_preview(body),
        ) from e


def parse_assets_response(body: bytes) -> list[Asset]:
    """Decode an assets list body (a single JSON array) into Asset records."""
    try:
        return _ASSET_LIST.validate_json(body)
    except ValidationError as e:
        raise DecodeError(
            f"Assets response could not be decoded: {e}",
            response_data=_preview(body),
        ) from e
