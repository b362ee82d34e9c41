"""
LinkedIn CLI - client library and command line tool for the LinkedIn REST API.

Provides OAuth 1.0a authenticated access to profiles, connections, people
search, messaging and status updates.
"""

__version__ = "1.0.0"
__prog_name__ = "linkedin"

from .api import LinkedInClient, get_client

__all__ = ["LinkedInClient", "get_client", "__version__", "__prog_name__"]
