"""
LinkedIn API Client Package.

Structure:
    - client.py: Main LinkedInClient facade
    - _http.py: Transport binding and request building
    - people.py: Profiles, connections, search, network activity
    - messaging.py: Messages
    - updates.py: Network and status updates
    - payloads.py: XML request bodies
    - result.py: XML response wrapper

Usage:
    from linkedin_cli.api import LinkedInClient, get_client

    client = LinkedInClient(config)

    # Domain-specific
    profile = client.people.profile()

    # Flat methods
    profile = client.user_profile()
"""

from .client import LinkedInClient, get_client, DELEGATED_OPERATIONS
from ._http import HTTPClient, RawBody, FormFields
from .people import PeopleAPI, resolve_user
from .messaging import MessagingAPI
from .updates import UpdatesAPI
from .result import Result

__all__ = [
    # Main client
    "LinkedInClient",
    "get_client",
    "DELEGATED_OPERATIONS",
    # HTTP layer
    "HTTPClient",
    "RawBody",
    "FormFields",
    # Domain APIs
    "PeopleAPI",
    "MessagingAPI",
    "UpdatesAPI",
    # Helpers
    "resolve_user",
    "Result",
]
