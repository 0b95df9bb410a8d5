"""
IMS Connector Utilities Package

URL normalization and form encoding shared by the connector.
"""

from ims_connector.utils.urls import build_resource, encode_form, normalize_base_url

__all__ = [
    "build_resource",
    "encode_form",
    "normalize_base_url",
]
