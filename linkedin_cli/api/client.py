"""
LinkedIn API Client - Main facade for all API operations.

Binds the HTTP transport to the OAuth consumer's credentials and exposes
the endpoint methods of the domain modules as flat methods.
"""

import logging
from typing import Optional, Any, Callable, Mapping, Sequence

import requests

from ..auth import AuthState, LinkedInOAuthConsumer, transition
from ..config import LinkedInConfig
from ..exceptions import UnsupportedOperationError
from ._http import HTTPClient
from .messaging import MessagingAPI
from .people import PeopleAPI
from .result import Result
from .updates import UpdatesAPI

logger = logging.getLogger(__name__)

# OAuth consumer operations reachable directly on the client
DELEGATED_OPERATIONS = frozenset([
    "get_request_token",
    "get_redirect_url",
    "get_access_token",
    "get_last_request_token",
    "get_last_access_token",
])


class LinkedInClient:
    """
    Client for the LinkedIn REST API.

    Provides both:
    - Domain-specific sub-clients (client.people, client.messaging, client.updates)
    - Flat endpoint methods (client.user_profile(), client.message(), ...)

    OAuth consumer operations (get_request_token, get_redirect_url,
    get_access_token, ...) are forwarded to the consumer; when one of them
    returns an access token the client switches to an authenticated
    transport.

    Usage:
        client = LinkedInClient({"consumer_key": KEY, "consumer_secret": SECRET})
        client.get_request_token()
        print(client.get_redirect_url())
        client.get_access_token(verifier)
        profile = client.user_profile()
    """

    def __init__(self, options: Any = None, consumer: Optional[LinkedInOAuthConsumer] = None):
        """
        Initialize the API client.

        Args:
            options: Configuration (LinkedInConfig, mapping, or None)
            consumer: Pre-built OAuth consumer. Built from the configuration if not provided.
        """
        self._config = LinkedInConfig.from_options(options)

        if consumer is not None:
            self._consumer = consumer
        else:
            self._consumer = LinkedInOAuthConsumer(self._config)

        if self._config.access_token is not None:
            session = self._config.access_token.get_http_client(self._config)
        else:
            session = requests.Session()

        self._http = HTTPClient(self._config, session)

        # Domain-specific API modules
        self.people = PeopleAPI(self._http)
        self.messaging = MessagingAPI(self._http)
        self.updates = UpdatesAPI(self._http)

    @property
    def config(self) -> LinkedInConfig:
        """Get the configuration."""
        return self._config

    @property
    def consumer(self) -> LinkedInOAuthConsumer:
        """Get the OAuth consumer."""
        return self._consumer

    @property
    def http(self) -> HTTPClient:
        """Get the HTTP client."""
        return self._http

    @property
    def state(self) -> AuthState:
        """Authentication state of the bound transport."""
        return self._http.state

    @property
    def last_response(self) -> Optional[requests.Response]:
        """Raw response of the most recent API request."""
        return self._http.last_response

    def set_http_client(self, session: requests.Session) -> "LinkedInClient":
        """Bind a new transport."""
        self._http.bind(session)
        return self

    def is_authorized(self) -> bool:
        """Check whether requests are signed with an access token."""
        return self._http.is_authenticated()

    # ========== Endpoint Methods ==========

    def user_profile(self, user: Any = None, include_custom_fields: bool = False) -> Result:
        """Get a member profile."""
        return self.people.profile(user, include_custom_fields)

    def user_connections(self, user: Any = None, params: Optional[Mapping[str, Any]] = None) -> Result:
        """Get a member's connections."""
        return self.people.connections(user, params)

    def search(self, params: Mapping[str, Any]) -> Result:
        """Search for people."""
        return self.people.search(params)

    def message(self, subject: str, body: str, recipients: Sequence[object]) -> bool:
        """Send a message to one or more members."""
        return self.messaging.send(subject, body, recipients)

    def network_activities(self, user: Any = None, params: Optional[Mapping[str, Any]] = None) -> Result:
        """Get the latest network activity."""
        return self.people.network_activities(user, params)

    def post_network_update(self, status: str) -> bool:
        """Post a network update."""
        return self.updates.post_network_update(status)

    def post_status_update(self, status: str, post_to_twitter: bool = False) -> bool:
        """Set the current status."""
        return self.updates.post_status_update(status, post_to_twitter)

    # ========== OAuth Consumer Forwarding ==========

    def _forward(self, name: str) -> Callable[..., Any]:
        operation = getattr(self._consumer, name)

        def forwarder(*args: Any, **kwargs: Any) -> Any:
            result = operation(*args, **kwargs)
            session = transition(self._http.session, result, self._config)
            if session is not self._http.session:
                self._http.bind(session)
            return result

        forwarder.__name__ = name
        forwarder.__doc__ = operation.__doc__
        return forwarder

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails
        if name.startswith("_"):
            raise AttributeError(name)

        if name in DELEGATED_OPERATIONS and hasattr(self._consumer, name):
            return self._forward(name)

        raise UnsupportedOperationError(name)

    # ========== Context Manager ==========

    def close(self) -> None:
        """Close the HTTP session."""
        self._http.close()

    def __enter__(self) -> "LinkedInClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


# Convenience function for quick API access
def get_client(options: Any = None) -> LinkedInClient:
    """
    Get an API client instance.

    Args:
        options: Optional configuration

    Returns:
        LinkedInClient instance
    """
    return LinkedInClient(options)
