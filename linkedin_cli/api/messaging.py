"""
Messaging API - Send messages to connections.
"""

from typing import Sequence

from ._http import HTTPClient, RawBody, is_created
from . import payloads
from ..exceptions import InvalidArgumentError


class MessagingAPI:
    """API for member-to-member messages."""

    def __init__(self, http: HTTPClient):
        """
        Initialize Messaging API.

        Args:
            http: HTTP client instance
        """
        self._http = http

    def send(self, subject: str, body: str, recipients: Sequence[object]) -> bool:
        """
        Send a message to one or more members.

        Markup tags in subject and body are stripped before sending.

        Args:
            subject: Message subject
            body: Message body
            recipients: List of member ids

        Returns:
            True if LinkedIn created the message

        Raises:
            InvalidArgumentError: If recipients is not a list or tuple
        """
        if not isinstance(recipients, (list, tuple)):
            raise InvalidArgumentError("Recipients must be supplied as a list")

        xml = payloads.mailbox_item(subject, body, recipients)
        response = self._http.post("/v1/people/~/mailbox", RawBody(xml))

        return is_created(response, "Message")
