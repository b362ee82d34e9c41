"""
Tests for the XML Result wrapper and payload builders.
"""

from unittest.mock import MagicMock

import pytest

from linkedin_cli.api import Result
from linkedin_cli.api import payloads
from linkedin_cli.exceptions import ResultParseError

PROFILE = b"""<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<person>
  <first-name>Jan</first-name>
  <last-name>Jansen</last-name>
  <positions total="2">
    <position><title>Developer</title></position>
    <position><title>Architect</title></position>
  </positions>
</person>
"""


class TestResult:
    """Tests for Result."""

    def test_from_response(self):
        """Test wrapping a response."""
        result = Result.from_response(MagicMock(status_code=200, content=PROFILE))
        assert result.status_code == 200
        assert "<first-name>Jan</first-name>" in result.body

    def test_item_access(self):
        """Test element text lookup by name."""
        result = Result(PROFILE, 200)
        assert result["first-name"] == "Jan"
        assert result["title"] == "Developer"

    def test_missing_item(self):
        """Test KeyError for absent elements."""
        with pytest.raises(KeyError):
            Result(PROFILE)["headline"]

    def test_text_default(self):
        """Test text with default."""
        assert Result(PROFILE).text("headline", "-") == "-"

    def test_contains(self):
        """Test membership checks."""
        result = Result(PROFILE)
        assert "last-name" in result
        assert "headline" not in result

    @pytest.mark.parametrize("name", ["b[", "*", "b/..", "{ns}b", ".//b"])
    def test_names_matched_literally(self, name):
        """Test names with path syntax are plain tag lookups."""
        result = Result(b"<a><b/></a>")

        assert name not in result
        assert result.text(name, "-") == "-"
        assert result.findall(name) == []
        with pytest.raises(KeyError):
            result[name]

    def test_findall(self):
        """Test finding repeated elements."""
        titles = [p.findtext("title") for p in Result(PROFILE).findall("position")]
        assert titles == ["Developer", "Architect"]

    def test_find_root(self):
        """Test the root element is found by name."""
        assert Result(PROFILE).find("person").tag == "person"

    def test_iteration(self):
        """Test iterating over root children."""
        tags = [element.tag for element in Result(PROFILE)]
        assert tags == ["first-name", "last-name", "positions"]

    def test_lazy_parsing(self):
        """Test malformed bodies only fail on structured access."""
        result = Result(b"<html>Service unavailable", 503)

        assert str(result) == "<html>Service unavailable"
        with pytest.raises(ResultParseError):
            result["status"]

    def test_to_dict(self):
        """Test conversion to nested dicts."""
        data = Result(PROFILE).to_dict()

        person = data["person"]
        assert person["first-name"] == "Jan"
        assert person["positions"]["@total"] == "2"
        assert [p["title"] for p in person["positions"]["position"]] == ["Developer", "Architect"]

    def test_status_element(self):
        """Test status taken from a status element."""
        assert Result("<response><status>success</status></response>", 200).is_success() is True
        assert Result("<response><status>failure</status></response>", 200).get_status() is False

    def test_status_from_code(self):
        """Test status falls back to the HTTP code."""
        assert Result(PROFILE, 200).is_success() is True
        assert Result("<error><status>404</status></error>", 404).is_success() is False
        assert Result(PROFILE).get_status() is None

    def test_str_body(self):
        """Test text bodies."""
        result = Result("<person><first-name>Ana</first-name></person>")
        assert result["first-name"] == "Ana"


class TestPayloads:
    """Tests for XML payload builders."""

    def test_sanitize_text(self):
        """Test tags and surrounding whitespace are stripped."""
        assert payloads.sanitize_text("  <b>hello</b> <br/>world\n") == "hello world"
        assert payloads.sanitize_text("a < b") == "a < b"
        assert payloads.sanitize_text("<!-- note -->text") == "text"

    def test_mailbox_item_structure(self):
        """Test mailbox-item document structure."""
        xml = payloads.mailbox_item("Subject", "Body", ["123", 456])
        result = Result(xml)

        assert xml.startswith("<?xml version='1.0' encoding='utf-8'?>")
        assert result.xml.tag == "mailbox-item"
        assert [child.tag for child in result.xml] == ["recipients", "body", "subject"]
        paths = [person.get("path") for person in result.findall("person")]
        assert paths == ["/people/123", "/people/456"]

    def test_mailbox_item_escapes_text(self):
        """Test remaining special characters are escaped."""
        xml = payloads.mailbox_item("Q&A", "x", ["1"])
        assert "<subject>Q&amp;A</subject>" in xml

    def test_person_activity(self):
        """Test activity document."""
        result = Result(payloads.person_activity("Hello"))
        assert result.xml.get("locale") == "en_US"
        assert result["content-type"] == "linkedin-html"
        assert result["body"] == "Hello"

    def test_current_status(self):
        """Test current-status document."""
        result = Result(payloads.current_status("Busy"))
        assert result.xml.tag == "current-status"
        assert result.xml.text == "Busy"

    def test_unicode(self):
        """Test documents are UTF-8."""
        xml = payloads.current_status("Grüße")
        assert "Grüße" in xml
        assert Result(xml.encode("utf-8"))["current-status"] == "Grüße"
