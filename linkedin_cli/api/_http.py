"""
Base HTTP client for the LinkedIn API.

Holds the bound transport (anonymous or OAuth-signed session) and builds
GET/POST/PUT requests against the fixed API base URL.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Mapping, Union

import requests

from .. import __version__
from ..auth import AuthState, auth_state
from ..config import API_BASE_URL, LinkedInConfig

logger = logging.getLogger(__name__)

XML_CONTENT_TYPE = "text/xml; charset=utf-8"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
USER_AGENT = f"linkedin-cli/{__version__}"

CREATED = 201


@dataclass(frozen=True)
class RawBody:
    """Request body sent verbatim (serialized XML)."""

    text: str
    content_type: str = XML_CONTENT_TYPE


@dataclass(frozen=True)
class FormFields:
    """Request body sent form-encoded."""

    fields: Mapping[str, Any] = field(default_factory=dict)
    content_type: str = FORM_CONTENT_TYPE


Payload = Union[RawBody, FormFields]


class HTTPClient:
    """
    Base HTTP client for the LinkedIn API.

    Handles:
    - Binding of the active transport (requests.Session or OAuth1Session)
    - Target URL composition from the fixed base URL
    - Body encoding per payload kind
    """

    BASE_URL = API_BASE_URL

    def __init__(self, config: LinkedInConfig, session: Optional[requests.Session] = None):
        """
        Initialize the HTTP client.

        Args:
            config: Client configuration
            session: Transport to bind. A new anonymous session if not provided.
        """
        self.config = config
        self._session: Optional[requests.Session] = None
        self.url: str = self.BASE_URL
        self.last_response: Optional[requests.Response] = None
        self.bind(session if session is not None else requests.Session())

    @property
    def session(self) -> requests.Session:
        """Get the bound transport."""
        return self._session

    @property
    def state(self) -> AuthState:
        """Authentication state of the bound transport."""
        return auth_state(self._session)

    def bind(self, session: requests.Session) -> "HTTPClient":
        """
        Replace the active transport and reset the target URL to the base URL.

        Args:
            session: New transport

        Returns:
            self
        """
        self._session = session
        self.url = self.BASE_URL
        logger.debug(f"Bound {type(session).__name__} ({self.state.value})")
        return self

    def is_authenticated(self) -> bool:
        """Check whether the bound transport signs requests with OAuth."""
        return self.state is AuthState.AUTHENTICATED

    def _set_path(self, path: str) -> str:
        self.url = self.BASE_URL + path
        return self.url

    def _send(
        self,
        method: str,
        params: Optional[Dict[str, Any]] = None,
        payload: Optional[Payload] = None,
    ) -> requests.Response:
        headers: Dict[str, str] = {"User-Agent": USER_AGENT}
        data: Any = None

        if isinstance(payload, RawBody):
            headers["Content-Type"] = payload.content_type
            data = payload.text.encode("utf-8")
        elif isinstance(payload, FormFields):
            headers["Content-Type"] = payload.content_type
            data = dict(payload.fields)

        logger.debug(f"Request: {method} {self.url}")

        response = self._session.request(
            method=method,
            url=self.url,
            params=params or None,
            data=data,
            headers=headers,
            timeout=self.config.timeout,
            verify=self.config.verify_ssl,
        )

        logger.debug(f"Response: {response.status_code}")
        self.last_response = response
        return response

    def get(self, path: str, query: Optional[Mapping[str, Any]] = None) -> requests.Response:
        """
        Make a GET request.

        Args:
            path: Path below the base URL
            query: Query parameters

        Returns:
            Raw response
        """
        self._set_path(path)
        return self._send("GET", params=dict(query or {}))

    def post(self, path: str, payload: Payload) -> requests.Response:
        """
        Make a POST request.

        Args:
            path: Path below the base URL
            payload: RawBody or FormFields

        Returns:
            Raw response
        """
        self._set_path(path)
        return self._send("POST", payload=payload)

    def put(self, path: str, payload: Payload) -> requests.Response:
        """
        Make a PUT request.

        Args:
            path: Path below the base URL
            payload: RawBody or FormFields

        Returns:
            Raw response
        """
        self._set_path(path)
        return self._send("PUT", payload=payload)

    def close(self) -> None:
        """Close the bound session."""
        if self._session is not None:
            self._session.close()

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def is_created(response: requests.Response, action: str) -> bool:
    """
    Map a write response to a success flag.

    Any status other than 201 Created is logged and reported as False;
    the response itself remains available as ``HTTPClient.last_response``.
    """
    if response.status_code == CREATED:
        return True
    logger.warning(f"{action} failed: HTTP {response.status_code}")
    return False
