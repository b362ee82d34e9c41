"""
Authentication module for the LinkedIn client.

Handles the three-legged OAuth 1.0a flow (request token, user authorization,
access token exchange). Request signing is done by requests-oauthlib.
"""

import enum
import logging
from typing import Optional, Dict, Any, Mapping, Union
from urllib.parse import urlparse, parse_qsl

import requests
from requests_oauthlib import OAuth1Session
from requests_oauthlib.oauth1_session import TokenMissing, TokenRequestDenied

from .config import LinkedInConfig
from .exceptions import AuthenticationError, APIError

logger = logging.getLogger(__name__)


class AuthState(enum.Enum):
    """Authentication state of a client's transport."""

    ANONYMOUS = "anonymous"
    AUTHENTICATED = "authenticated"


class _Token:
    """OAuth token pair plus the raw provider response."""

    def __init__(self, token: str, token_secret: str = "", params: Optional[Dict[str, Any]] = None):
        self.token = token
        self.token_secret = token_secret
        self.params = dict(params or {})

    @classmethod
    def from_response(cls, data: Mapping[str, Any]) -> "_Token":
        """Build a token from a provider response dict."""
        params = dict(data)
        token = params.get("oauth_token")
        if not token:
            raise AuthenticationError("Token response did not include oauth_token")
        return cls(token, params.get("oauth_token_secret", ""), params)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _Token):
            return NotImplemented
        return (type(self), self.token, self.token_secret) == (type(other), other.token, other.token_secret)

    def __hash__(self) -> int:
        return hash((type(self), self.token, self.token_secret))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(token={self.token!r})"


class RequestToken(_Token):
    """Temporary credentials used while the user authorizes the application."""
    pass


class AccessToken(_Token):
    """Token credentials that authorize API requests on behalf of a user."""

    def get_http_client(self, config: Any = None) -> OAuth1Session:
        """
        Create an HTTP session that signs every request with this token.

        Args:
            config: Client configuration (or anything LinkedInConfig.from_options accepts)

        Returns:
            Authenticated session
        """
        config = LinkedInConfig.from_options(config)
        return OAuth1Session(
            config.consumer_key,
            client_secret=config.consumer_secret,
            resource_owner_key=self.token,
            resource_owner_secret=self.token_secret,
        )


def is_credential(value: Any) -> bool:
    """Check whether a value is an access token that yields an authenticated transport."""
    return isinstance(value, AccessToken)


def auth_state(session: requests.Session) -> AuthState:
    """Report the authentication state of a transport."""
    if isinstance(session, OAuth1Session):
        return AuthState.AUTHENTICATED
    return AuthState.ANONYMOUS


def transition(
    session: requests.Session,
    credential: Any,
    config: LinkedInConfig
) -> requests.Session:
    """
    Compute the transport that follows ``session`` once ``credential`` is known.

    Args:
        session: Currently bound transport
        credential: Value returned by an OAuth consumer operation
        config: Client configuration passed to the credential

    Returns:
        A new authenticated session for credential-shaped values,
        otherwise ``session`` itself
    """
    if not is_credential(credential):
        return session

    new_session = credential.get_http_client(config)
    logger.info(
        "Authentication state: %s -> %s",
        auth_state(session).value,
        auth_state(new_session).value,
    )
    return new_session


class LinkedInOAuthConsumer:
    """
    OAuth 1.0a consumer for LinkedIn.

    Supports:
    - Request token acquisition
    - Authorization URL generation
    - Access token exchange
    """

    def __init__(self, config: Any = None):
        """
        Initialize the consumer.

        Args:
            config: Client configuration
        """
        self.config = LinkedInConfig.from_options(config)
        self._last_request_token: Optional[RequestToken] = None
        self._last_access_token: Optional[AccessToken] = None

    def _session(self, **kwargs: Any) -> OAuth1Session:
        return OAuth1Session(
            self.config.consumer_key,
            client_secret=self.config.consumer_secret,
            **kwargs
        )

    def _request_kwargs(self) -> Dict[str, Any]:
        return {"timeout": self.config.timeout, "verify": self.config.verify_ssl}

    def get_request_token(self, **params: Any) -> RequestToken:
        """
        Obtain a request token.

        Args:
            **params: Extra parameters sent to the request token endpoint
                (e.g. ``scope``)

        Returns:
            The request token, also kept as the last request token

        Raises:
            AuthenticationError: If LinkedIn refuses the consumer credentials
            APIError: On connection failure
        """
        url = self.config.request_token_url
        logger.debug(f"Fetching request token from {url}")

        session = self._session(callback_uri=self.config.callback_url or None)
        try:
            data = session.fetch_request_token(url, params=params or None, **self._request_kwargs())
        except (TokenRequestDenied, TokenMissing) as e:
            raise AuthenticationError("Request token was refused", details=str(e))
        except requests.exceptions.RequestException as e:
            raise APIError(f"Request token fetch failed: {e}")
        finally:
            session.close()

        self._last_request_token = RequestToken.from_response(data)
        return self._last_request_token

    def get_redirect_url(self, token: Optional[RequestToken] = None) -> str:
        """
        Get the URL the user must visit to authorize the application.

        Args:
            token: Request token (defaults to the last one obtained)

        Returns:
            Authorization URL
        """
        token = token or self._last_request_token
        if token is None:
            raise AuthenticationError("No request token available; call get_request_token first")

        session = self._session()
        try:
            return session.authorization_url(self.config.authorize_url, request_token=token.token)
        finally:
            session.close()

    def get_access_token(
        self,
        query: Union[Mapping[str, Any], str],
        token: Optional[RequestToken] = None
    ) -> AccessToken:
        """
        Exchange an authorized request token for an access token.

        Args:
            query: Callback query parameters (``oauth_token``, ``oauth_verifier``),
                the full callback URL, or the bare verifier code
            token: Request token (defaults to the last one obtained)

        Returns:
            The access token, also kept as the last access token

        Raises:
            AuthenticationError: On token mismatch, missing verifier or refusal
            APIError: On connection failure
        """
        token = token or self._last_request_token
        if token is None:
            raise AuthenticationError("No request token available; call get_request_token first")

        params = _parse_callback(query)

        returned_token = params.get("oauth_token")
        if returned_token and returned_token != token.token:
            raise AuthenticationError("Authorized token does not match the request token")

        verifier = params.get("oauth_verifier")
        if not verifier:
            raise AuthenticationError("Authorization response has no oauth_verifier")

        url = self.config.access_token_url
        logger.debug(f"Fetching access token from {url}")

        session = self._session(
            resource_owner_key=token.token,
            resource_owner_secret=token.token_secret,
            verifier=verifier,
        )
        try:
            data = session.fetch_access_token(url, **self._request_kwargs())
        except (TokenRequestDenied, TokenMissing) as e:
            raise AuthenticationError("Access token was refused", details=str(e))
        except requests.exceptions.RequestException as e:
            raise APIError(f"Access token fetch failed: {e}")
        finally:
            session.close()

        self._last_access_token = AccessToken.from_response(data)
        logger.info("Access token obtained")
        return self._last_access_token

    def get_last_request_token(self) -> Optional[RequestToken]:
        """Get the most recently obtained request token."""
        return self._last_request_token

    def get_last_access_token(self) -> Optional[AccessToken]:
        """Get the most recently obtained access token."""
        return self._last_access_token


def _parse_callback(query: Union[Mapping[str, Any], str, None]) -> Dict[str, str]:
    """Turn a callback URL, query mapping or bare verifier into a dict."""
    if isinstance(query, Mapping):
        return {str(k): str(v) for k, v in query.items() if v is not None}

    if not query:
        return {}

    query = query.strip()
    if "=" in query:
        # Full callback URL or raw query string
        query_string = urlparse(query).query if "?" in query else query
        return dict(parse_qsl(query_string))

    return {"oauth_verifier": query}
