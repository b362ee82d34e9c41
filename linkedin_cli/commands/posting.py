"""
Write commands for the LinkedIn CLI.

Commands:
- message: Send a message
- share: Post a network update
- status: Set the current status
"""

import sys
from typing import Tuple

import click

from . import (
    LinkedInContext,
    pass_context,
    print_error,
    print_success,
    require_auth,
)
from ..api import LinkedInClient
from ..exceptions import LinkedInError
from ..utils import setup_logging


def _report(ok: bool, client: LinkedInClient, success_message: str) -> None:
    if ok:
        print_success(success_message)
        return

    response = client.last_response
    status = response.status_code if response is not None else "no response"
    print_error(f"Request failed: HTTP {status}", response.text if response is not None else None)
    sys.exit(1)


def register_posting_commands(cli: click.Group) -> None:
    """Register write commands with the CLI."""

    @cli.command('message')
    @click.argument('recipients', nargs=-1, required=True)
    @click.option('--subject', '-s', required=True, help='Message subject')
    @click.option('--body', '-b', required=True, help='Message body')
    @click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
    @pass_context
    @require_auth
    def message(ctx: LinkedInContext, recipients: Tuple[str, ...], subject: str, body: str, verbose: bool):
        """
        Send a message to one or more members.

        \b
        Examples:
          linkedin message 12345 -s "Hello" -b "How are you?"
        """
        setup_logging(verbose)

        try:
            with LinkedInClient(ctx.config_manager.get()) as client:
                ok = client.message(subject, body, list(recipients))
                _report(ok, client, f"Message sent to {len(recipients)} recipient(s).")
        except LinkedInError as e:
            print_error(str(e))
            sys.exit(1)

    @cli.command('share')
    @click.argument('text')
    @click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
    @pass_context
    @require_auth
    def share(ctx: LinkedInContext, text: str, verbose: bool):
        """Post an update to your network activity stream."""
        setup_logging(verbose)

        try:
            with LinkedInClient(ctx.config_manager.get()) as client:
                ok = client.post_network_update(text)
                _report(ok, client, "Network update posted.")
        except LinkedInError as e:
            print_error(str(e))
            sys.exit(1)

    @cli.command('status')
    @click.argument('text')
    @click.option('--twitter', is_flag=True, help='Also post the status to Twitter')
    @click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
    @pass_context
    @require_auth
    def status(ctx: LinkedInContext, text: str, twitter: bool, verbose: bool):
        """Set your current status."""
        setup_logging(verbose)

        try:
            with LinkedInClient(ctx.config_manager.get()) as client:
                ok = client.post_status_update(text, post_to_twitter=twitter)
                _report(ok, client, "Status updated.")
        except LinkedInError as e:
            print_error(str(e))
            sys.exit(1)
