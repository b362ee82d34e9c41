"""
XML request bodies for LinkedIn write operations.
"""

import re
import xml.etree.ElementTree as ET
from typing import Iterable

_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)
_TAG_RE = re.compile(r"</?[A-Za-z!?][^>]*>")

NETWORK_UPDATE_LOCALE = "en_US"
NETWORK_UPDATE_CONTENT_TYPE = "linkedin-html"


def sanitize_text(value: object) -> str:
    """Strip markup tags and surrounding whitespace."""
    text = _COMMENT_RE.sub("", str(value))
    text = _TAG_RE.sub("", text)
    return text.strip()


def _serialize(root: ET.Element) -> str:
    return ET.tostring(root, encoding="utf-8", xml_declaration=True).decode("utf-8")


def _child(parent: ET.Element, tag: str, text: str) -> ET.Element:
    element = ET.SubElement(parent, tag)
    element.text = text
    return element


def mailbox_item(subject: str, body: str, recipients: Iterable[object]) -> str:
    """
    Build a mailbox-item document.

    Args:
        subject: Message subject
        body: Message body (markup is stripped)
        recipients: Member ids or tokens

    Returns:
        Serialized XML
    """
    root = ET.Element("mailbox-item")

    elem_recipients = ET.SubElement(root, "recipients")
    for recipient in recipients:
        elem_recipient = ET.SubElement(elem_recipients, "recipient")
        ET.SubElement(elem_recipient, "person", path=f"/people/{recipient}")

    _child(root, "body", sanitize_text(body))
    _child(root, "subject", sanitize_text(subject))

    return _serialize(root)


def person_activity(status: str) -> str:
    """Build an activity document for the network updates stream."""
    root = ET.Element("activity", locale=NETWORK_UPDATE_LOCALE)
    _child(root, "content-type", NETWORK_UPDATE_CONTENT_TYPE)
    _child(root, "body", str(status))
    return _serialize(root)


def current_status(status: str) -> str:
    """Build a current-status document."""
    root = ET.Element("current-status")
    root.text = str(status)
    return _serialize(root)
