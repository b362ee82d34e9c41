"""
People API - Profiles, connections, people search and network activity.
"""

import logging
from typing import Optional, Dict, Any, Mapping
from urllib.parse import quote_plus

from ._http import HTTPClient
from .result import Result

logger = logging.getLogger(__name__)

SELF = "~"

PROFILE_FIELDS = (
    "first-name",
    "last-name",
    "interests",
    "positions",
    "phone-numbers",
    "num-recommenders",
    "recommendations-received",
    "honors",
    "associations",
    "specialties",
    "connections",
    "twitter-accounts",
    "im-accounts",
    "headline",
    "summary",
    "current-status",
    "picture-url",
    "date-of-birth",
    "public-profile-url",
)

SEARCH_KEYS = frozenset([
    "keywords",
    "first-name",
    "last-name",
    "company-name",
    "current-company",
    "title",
    "school",
    "current-school",
    "country-code",
    "postal-code",
    "distance",
    "start",
    "count",
    "facet",
    "facets",
    "sort",
])


def resolve_user(user: Any = None) -> str:
    """
    Turn a user parameter into a people path segment.

    Args:
        user: None for the authenticated member, a ready-made segment
            string, or a mapping/object with ``url`` or ``id``

    Returns:
        ``~``, ``url=...``, ``id=N`` or the string unchanged

    Note:
        An ``id`` that is not a whole number (``"abc"``, ``"12x"``) resolves
        to ``~``, the authenticated member, rather than to ``id=0``.
    """
    if isinstance(user, str):
        return user or SELF

    if not user or isinstance(user, bool):
        return SELF

    if isinstance(user, int):
        return str(user)

    if isinstance(user, Mapping):
        url = user.get("url")
        member_id = user.get("id")
    else:
        url = getattr(user, "url", None)
        member_id = getattr(user, "id", None)

    if url:
        return "url=" + quote_plus(str(url))

    if member_id is not None:
        try:
            return f"id={int(member_id)}"
        except (TypeError, ValueError):
            logger.debug(f"Ignoring non-numeric member id: {member_id!r}")

    return SELF


def filter_search_params(params: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """Keep allowed search keys and percent-encode their values."""
    filtered: Dict[str, str] = {}
    for key, value in (params or {}).items():
        if key in SEARCH_KEYS:
            filtered[key] = quote_plus(str(value))
        else:
            logger.debug(f"Dropping unsupported search parameter: {key}")
    return filtered


class PeopleAPI:
    """
    API for member data.

    Handles:
    - Profiles (optionally with the extended field set)
    - Connections
    - People search
    - Network activity stream
    """

    def __init__(self, http: HTTPClient):
        """
        Initialize People API.

        Args:
            http: HTTP client instance
        """
        self._http = http

    def profile(self, user: Any = None, include_custom_fields: bool = False) -> Result:
        """
        Get a member profile.

        Args:
            user: Member (see resolve_user); the authenticated member if omitted
            include_custom_fields: Request the extended field set

        Returns:
            Profile document
        """
        path = f"/v1/people/{resolve_user(user)}"
        if include_custom_fields:
            path += ":(" + ",".join(PROFILE_FIELDS) + ")"

        return Result.from_response(self._http.get(path))

    def connections(self, user: Any = None, params: Optional[Mapping[str, Any]] = None) -> Result:
        """
        Get a member's connections.

        Args:
            user: Member (see resolve_user); the authenticated member if omitted
            params: Additional query parameters (e.g. start, count)
        """
        path = f"/v1/people/{resolve_user(user)}/connections"
        return Result.from_response(self._http.get(path, params))

    def search(self, params: Mapping[str, Any]) -> Result:
        """
        Search for people.

        Unsupported keys are dropped. Values are percent-encoded and sent
        as a ready-made query string.

        Args:
            params: Search parameters keyed by LinkedIn parameter name
        """
        filtered = filter_search_params(params)
        path = "/v1/people-search"
        if filtered:
            path += "?" + "&".join(f"{key}={value}" for key, value in filtered.items())

        return Result.from_response(self._http.get(path))

    def network_activities(self, user: Any = None, params: Optional[Mapping[str, Any]] = None) -> Result:
        """
        Get the latest network activity (status and profile updates).

        Args:
            user: Member (see resolve_user); the authenticated member if omitted
            params: Additional query parameters (e.g. type, count, after)
        """
        path = f"/v1/people/{resolve_user(user)}/network/updates"
        return Result.from_response(self._http.get(path, params))
