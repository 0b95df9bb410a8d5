"""
Connector - Client for the IMS (inventory management) REST API.

Usage:
    with Connector("user", "secret", "ims.example.com:8000", timeout=5) as connector:
        if connector.authenticate():
            assets = connector.get_assets()
"""

import logging
import threading
from typing import Optional

import httpx

from ims_connector.errors import HTTPStatusError, InvalidMethodError, TransportError
from ims_connector.models import Asset, AuthenticationResult, Session
from ims_connector.parsers import parse_assets_response, parse_authentication_response
from ims_connector.settings import DEFAULTS, ConnectorSettings
from ims_connector.utils.urls import build_resource, encode_form, normalize_base_url

logger = logging.getLogger(__name__)

VALID_METHODS = ("GET", "POST")

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"


class Connector:
    """
    Synchronous client for the IMS API.

    Holds the credentials, the normalized API root and an httpx.Client with a
    fixed timeout. Authentication state lives in an immutable Session that
    authenticate() replaces as a whole, so every request is signed from a
    single consistent snapshot.
    """

    def __init__(
        self,
        username: str,
        password: str,
        base_url: str,
        timeout: float = DEFAULTS["timeout_seconds"],
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the connector. No network I/O happens here.

        Args:
            username: Login username
            password: Login password
            base_url: Host, host:port or URL of the IMS server; normalized to
                end with /api/ (e.g. "10.0.0.1:8000" -> "http://10.0.0.1:8000/api/")
            timeout: Request timeout in seconds (0 or less disables the timeout)
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests)
        """
        self._username = username
        self._password = password
        self.base_url = normalize_base_url(base_url)
        self.timeout = timeout

        self._session = Session()
        self._session_lock = threading.Lock()
        self.last_authentication: Optional[AuthenticationResult] = None

        self._client = httpx.Client(
            timeout=httpx.Timeout(timeout if timeout > 0 else None),
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Optional[ConnectorSettings] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> "Connector":
        """Build a connector from ConnectorSettings (IMS_* environment by default)."""
        settings = settings or ConnectorSettings()
        return cls(
            settings.username,
            settings.password,
            settings.base_url,
            timeout=settings.timeout,
            transport=transport,
        )

    def __enter__(self) -> "Connector":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        """Close the HTTP client and release connections."""
        self._client.close()

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def username(self) -> str:
        return self._username

    @property
    def password(self) -> str:
        return self._password

    @property
    def session(self) -> Session:
        """Current authentication session."""
        with self._session_lock:
            return self._session

    @property
    def token(self) -> str:
        return self.session.token

    @property
    def authenticated(self) -> bool:
        return self.session.authenticated

    def _set_session(self, session: Session) -> None:
        with self._session_lock:
            self._session = session

    def logout(self) -> None:
        """Forget the current token. Local only, the server is not contacted."""
        self._set_session(Session())

    # -------------------------------------------------------------------------
    # Request plumbing
    # -------------------------------------------------------------------------

    def _build_resource(self, resource: str) -> str:
        return build_resource(self.base_url, resource)

    def _build_username_and_password_params(self) -> str:
        return encode_form({"username": self._username, "password": self._password})

    def _build_request(
        self,
        method: str,
        url: str,
        body: str = "",
        session: Optional[Session] = None,
    ) -> httpx.Request:
        """
        Build a request with the headers matching the session.

        Args:
            method: GET or POST
            url: Absolute request URL
            body: Raw request payload, sent verbatim
            session: Session to sign with (defaults to the current one)

        Returns:
            httpx.Request ready to send

        Raises:
            InvalidMethodError: For any method other than GET or POST
        """
        method = method.upper()
        if method not in VALID_METHODS:
            raise InvalidMethodError(f"Method {method} is not supported")

        if session is None:
            session = self.session

        headers = {"Cache-Control": "no-cache"}
        if session.authenticated:
            headers["Content-Type"] = JSON_CONTENT_TYPE
            headers["Authorization"] = f"Token {session.token}"
        else:
            headers["Content-Type"] = FORM_CONTENT_TYPE

        return self._client.build_request(method, url, content=body, headers=headers)

    def _execute(self, request: httpx.Request) -> httpx.Response:
        """Send a request and read the whole response body.

        Raises:
            TransportError: On timeout, connection or DNS failure
        """
        logger.debug(f"{request.method} {request.url}")
        try:
            response = self._client.send(request)
        except httpx.RequestError as e:
            logger.error(f"{request.method} {request.url} failed: {e}")
            raise TransportError(f"Network error: {e}") from e
        logger.debug(f"{request.method} {request.url} -> {response.status_code}")
        return response

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def authenticate(self) -> bool:
        """
        Log in with the configured credentials.

        A rejected login is not an error: the session is cleared and False is
        returned.

        Returns:
            True if the server issued a token, False otherwise

        Raises:
            TransportError: If the server could not be reached
            HTTPStatusError: If the server answered with a 5xx status
            FatalDecodeError: If the login response is not readable JSON
        """
        request = self._build_request(
            "POST",
            self._build_resource(DEFAULTS["login_resource"]),
            self._build_username_and_password_params(),
            session=Session(),
        )
        response = self._execute(request)

        if response.is_server_error:
            raise HTTPStatusError(
                f"Login failed: {response.status_code}",
                status_code=response.status_code,
                response_data=response.text,
            )

        result = parse_authentication_response(response.content)
        self.last_authentication = result

        if result.succeeded:
            self._set_session(Session(token=result.key))
            logger.info(f"Authenticated against {self.base_url}")
            return True

        self._set_session(Session())
        logger.warning(f"Authentication rejected by {self.base_url}: {result.non_field_errors}")
        return False

    def get_assets(self, session: Optional[Session] = None) -> list[Asset]:
        """
        Fetch every asset in a single request.

        Args:
            session: Session to sign with (defaults to the current one)

        Returns:
            Assets in the order the server returned them

        Raises:
            TransportError: If the server could not be reached
            HTTPStatusError: If the server answered with a non-2xx status
            DecodeError: If the body is not a JSON array of assets
        """
        request = self._build_request(
            "GET",
            self._build_resource(DEFAULTS["assets_resource"]),
            session=session,
        )
        response = self._execute(request)

        if not response.is_success:
            raise HTTPStatusError(
                f"Assets request failed: {response.status_code}",
                status_code=response.status_code,
                response_data=response.text,
            )

        return parse_assets_response(response.content)
