"""
Tests for transport binding and request building.
"""

from unittest.mock import MagicMock

import pytest
import requests
from requests_oauthlib import OAuth1Session

from linkedin_cli.api import HTTPClient, RawBody, FormFields
from linkedin_cli.api._http import USER_AGENT, is_created
from linkedin_cli.auth import AuthState
from linkedin_cli.config import LinkedInConfig


def make_session(spec=requests.Session, status_code=200):
    """Create a mock transport."""
    session = MagicMock(spec=spec)
    session.headers = {}
    session.request.return_value = MagicMock(status_code=status_code, content=b"<ok/>")
    return session


@pytest.fixture
def config():
    return LinkedInConfig(timeout=12, verify_ssl=False)


class TestBinding:
    """Tests for HTTPClient.bind and authentication checks."""

    def test_default_session_is_anonymous(self, config):
        """Test a fresh client is not authenticated."""
        http = HTTPClient(config)
        assert isinstance(http.session, requests.Session)
        assert http.is_authenticated() is False
        assert http.state is AuthState.ANONYMOUS

    def test_oauth_session_is_authenticated(self, config):
        """Test binding an OAuth1Session reports authenticated."""
        http = HTTPClient(config)
        http.bind(OAuth1Session("key", client_secret="secret",
                                resource_owner_key="t", resource_owner_secret="s"))
        assert http.is_authenticated() is True
        assert http.state is AuthState.AUTHENTICATED

    def test_bind_resets_url(self, config):
        """Test binding always resets the target URL to the base URL."""
        http = HTTPClient(config, make_session())
        http.get("/v1/people/~")
        assert http.url == "https://api.linkedin.com/v1/people/~"

        http.bind(make_session())
        assert http.url == "https://api.linkedin.com"

        http.bind(make_session())
        assert http.url == "https://api.linkedin.com"

    def test_bind_replaces_session(self, config):
        """Test the new session replaces the old one."""
        first, second = make_session(), make_session()
        http = HTTPClient(config, first)

        http.bind(second)
        http.get("/v1/people/~")

        assert http.session is second
        first.request.assert_not_called()
        second.request.assert_called_once()

    def test_bind_leaves_session_untouched(self, config):
        """Test binding does not modify the session's default headers."""
        session = requests.Session()
        before = dict(session.headers)

        http = HTTPClient(config)
        http.bind(session)

        assert dict(session.headers) == before
        assert session.auth is None

    def test_user_agent_sent_per_request(self, config):
        """Test the User-Agent header travels with each request."""
        session = make_session()
        http = HTTPClient(config, session)

        http.get("/v1/people/~")

        assert session.headers == {}
        headers = session.request.call_args.kwargs["headers"]
        assert headers["User-Agent"] == USER_AGENT
        assert USER_AGENT.startswith("linkedin-cli/")

    def test_bind_returns_self(self, config):
        """Test bind is chainable."""
        http = HTTPClient(config)
        assert http.bind(make_session()) is http


class TestRequests:
    """Tests for GET/POST/PUT request building."""

    def test_get_with_query(self, config):
        """Test GET passes query parameters and config options."""
        session = make_session()
        http = HTTPClient(config, session)

        response = http.get("/v1/people/~/connections", {"count": 5})

        session.request.assert_called_once_with(
            method="GET",
            url="https://api.linkedin.com/v1/people/~/connections",
            params={"count": 5},
            data=None,
            headers={"User-Agent": USER_AGENT},
            timeout=12,
            verify=False,
        )
        assert response is session.request.return_value
        assert http.last_response is response

    def test_post_raw_body(self, config):
        """Test raw XML bodies are sent verbatim with the XML content type."""
        session = make_session()
        http = HTTPClient(config, session)

        http.post("/v1/people/~/mailbox", RawBody("<a>é</a>"))

        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "POST"
        assert kwargs["data"] == "<a>é</a>".encode("utf-8")
        assert kwargs["headers"] == {"User-Agent": USER_AGENT, "Content-Type": "text/xml; charset=utf-8"}

    def test_put_form_fields(self, config):
        """Test form fields are sent form-encoded."""
        session = make_session()
        http = HTTPClient(config, session)

        http.put("/v1/people/~/current-status", FormFields({"status": "hi"}))

        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "PUT"
        assert kwargs["url"] == "https://api.linkedin.com/v1/people/~/current-status"
        assert kwargs["data"] == {"status": "hi"}
        assert kwargs["headers"] == {
            "User-Agent": USER_AGENT,
            "Content-Type": "application/x-www-form-urlencoded",
        }

    def test_status_not_validated(self, config):
        """Test error statuses are returned, not raised."""
        session = make_session(status_code=500)
        http = HTTPClient(config, session)

        assert http.get("/v1/people/~").status_code == 500

    def test_transport_errors_propagate(self, config):
        """Test requests exceptions surface unchanged."""
        session = make_session()
        session.request.side_effect = requests.exceptions.ConnectionError("down")
        http = HTTPClient(config, session)

        with pytest.raises(requests.exceptions.ConnectionError):
            http.get("/v1/people/~")

        session.request.assert_called_once()

    def test_close(self, config):
        """Test close closes the bound session."""
        session = make_session()
        with HTTPClient(config, session):
            pass
        session.close.assert_called_once()


class TestIsCreated:
    """Tests for write response mapping."""

    @pytest.mark.parametrize("status_code,expected", [
        (201, True),
        (200, False),
        (400, False),
        (401, False),
        (500, False),
    ])
    def test_status_mapping(self, status_code, expected):
        """Test only 201 Created maps to True."""
        assert is_created(MagicMock(status_code=status_code), "Test") is expected
