"""
IMS Connector - Client for the inventory management (IMS) REST API.

Usage:
    from ims_connector import Connector

    connector = Connector("some_username", "some_password", "ims.example.com:8000", timeout=5)
    if connector.authenticate():
        for asset in connector.get_assets():
            print(asset.id, asset.name, asset.tags)
    connector.close()
"""

from ims_connector.connector import Connector
from ims_connector.errors import (
    ConnectorError,
    DecodeError,
    FatalDecodeError,
    HTTPStatusError,
    InvalidMethodError,
    TransportError,
)
from ims_connector.models import Asset, AuthenticationResult, Session
from ims_connector.settings import DEFAULTS, ConnectorSettings

__all__ = [
    "Connector",
    "ConnectorSettings",
    "DEFAULTS",
    "Session",
    "Asset",
    "AuthenticationResult",
    # Errors
    "ConnectorError",
    "InvalidMethodError",
    "TransportError",
    "HTTPStatusError",
    "DecodeError",
    "FatalDecodeError",
]
