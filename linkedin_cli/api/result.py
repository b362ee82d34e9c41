"""
Read-only view over an XML response body.
"""

import xml.etree.ElementTree as ET
from typing import Optional, Dict, Any, Iterator, List, Union

import requests

from ..exceptions import ResultParseError


class Result:
    """
    Wraps a response body and parses it as XML on first structured access.

    Usage:
        result = client.user_profile()
        result["first-name"]
        result.findall("position")
    """

    def __init__(self, body: Union[bytes, str], status_code: Optional[int] = None):
        self._body = body
        self.status_code = status_code
        self._xml: Optional[ET.Element] = None

    @classmethod
    def from_response(cls, response: requests.Response) -> "Result":
        """Wrap a received HTTP response."""
        return cls(response.content, response.status_code)

    @property
    def body(self) -> str:
        """Raw response body as text."""
        if isinstance(self._body, bytes):
            return self._body.decode("utf-8", errors="replace")
        return self._body

    @property
    def xml(self) -> ET.Element:
        """Parsed root element."""
        if self._xml is None:
            try:
                self._xml = ET.fromstring(self._body)
            except ET.ParseError as e:
                raise ResultParseError("Response body is not valid XML", details=str(e))
        return self._xml

    def _named(self, name: str) -> Iterator[ET.Element]:
        # Exact tag comparison; names are never read as ElementPath syntax
        return (element for element in self.xml.iter() if element.tag == name)

    def find(self, name: str) -> Optional[ET.Element]:
        """Find the first element named ``name`` (the root included)."""
        return next(self._named(name), None)

    def findall(self, name: str) -> List[ET.Element]:
        """Find all elements named ``name`` below the root."""
        return [element for element in self._named(name) if element is not self.xml]

    def text(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Get the text of the first element named ``name``."""
        element = self.find(name)
        if element is None:
            return default
        return element.text or ""

    def get_status(self) -> Optional[bool]:
        """
        Get the status reported in the body.

        A ``<status>`` element of ``success``/``failure`` wins; otherwise
        the HTTP status code decides. None when neither is known.
        """
        status = self.text("status")
        if status is not None:
            status = status.strip().lower()
            if status == "success":
                return True
            if status == "failure":
                return False
        if self.status_code is None:
            return None
        return 200 <= self.status_code < 300

    def is_success(self) -> bool:
        """Check whether the response reports success."""
        return bool(self.get_status())

    def to_dict(self) -> Dict[str, Any]:
        """Convert the document to nested dicts keyed by tag name."""
        return {self.xml.tag: _element_to_python(self.xml)}

    def __getitem__(self, name: str) -> str:
        value = self.text(name)
        if value is None:
            raise KeyError(name)
        return value

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find(name) is not None

    def __iter__(self) -> Iterator[ET.Element]:
        return iter(self.xml)

    def __str__(self) -> str:
        return self.body

    def __repr__(self) -> str:
        return f"Result(status_code={self.status_code!r})"


def _element_to_python(element: ET.Element) -> Any:
    children = list(element)
    if not children and not element.attrib:
        return (element.text or "").strip()

    data: Dict[str, Any] = {f"@{key}": value for key, value in element.attrib.items()}
    for child in children:
        value = _element_to_python(child)
        if child.tag in data:
            if not isinstance(data[child.tag], list):
                data[child.tag] = [data[child.tag]]
            data[child.tag].append(value)
        else:
            data[child.tag] = value

    text = (element.text or "").strip()
    if text:
        data["#text"] = text
    return data
