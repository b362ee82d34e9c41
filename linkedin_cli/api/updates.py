"""
Updates API - Network updates and current status.
"""

from ._http import HTTPClient, RawBody, is_created
from . import payloads


class UpdatesAPI:
    """
    API for posting member updates.

    Handles:
    - Network updates (person activities, visible to connections)
    - Current status, optionally forwarded to Twitter
    """

    def __init__(self, http: HTTPClient):
        """
        Initialize Updates API.

        Args:
            http: HTTP client instance
        """
        self._http = http

    def post_network_update(self, status: str) -> bool:
        """
        Post an update to the member's network activity stream.

        Args:
            status: Update text (linkedin-html)

        Returns:
            True if LinkedIn created the activity
        """
        response = self._http.post(
            "/v1/people/~/person-activities",
            RawBody(payloads.person_activity(status))
        )
        return is_created(response, "Network update")

    def post_status_update(self, status: str, post_to_twitter: bool = False) -> bool:
        """
        Set the member's current status.

        Args:
            status: Status text
            post_to_twitter: Also post to the member's Twitter account

        Returns:
            True if LinkedIn accepted the status
        """
        path = "/v1/people/~/current-status"
        if post_to_twitter:
            path += "?twitter-post=true"

        response = self._http.put(path, RawBody(payloads.current_status(status)))
        return is_created(response, "Status update")
