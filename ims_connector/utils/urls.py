"""URL and form-body helpers for the IMS API."""

from urllib.parse import urlencode

from ims_connector.settings import DEFAULTS


def normalize_base_url(raw: str) -> str:
    """
    Normalize a user-supplied host or URL into the API root.

    A missing http:// or https:// scheme gets http://, and anything not already
    ending in /api/ has its trailing slashes stripped and /api/ appended.

    Examples:
        >>> normalize_base_url("192.168.137.253:8000")
        'http://192.168.137.253:8000/api/'
        >>> normalize_base_url("https://ims.example.com/")
        'https://ims.example.com/api/'
    """
    url = raw
    if not (url.startswith("http://") or url.startswith("https://")):
        url = DEFAULTS["default_scheme"] + url

    api_path = DEFAULTS["api_path"]
    if not url.endswith(api_path):
        url = url.rstrip("/") + api_path
    return url


def build_resource(base_url: str, resource: str) -> str:
    """Join a resource path onto the API root, always with a trailing slash."""
    return base_url + resource.strip("/") + "/"


def encode_form(values: dict[str, str]) -> str:
    """URL-encode form fields with keys in sorted order."""
    return urlencode(sorted(values.items()))
