"""
Read commands for the LinkedIn CLI.

Commands:
- profile: Show a member profile
- connections: List a member's connections
- search: Search for people
- updates: Show network activity
"""

import sys
from typing import Optional, Tuple

import click

from . import (
    LinkedInContext,
    common_options,
    pass_context,
    print_error,
    print_result,
    require_auth,
)
from ..api import LinkedInClient
from ..exceptions import LinkedInError
from ..utils import parse_parameters, setup_logging


def _user_argument(user: Optional[str]):
    """Map the USER argument to a resolvable value (id, URL or token)."""
    if not user:
        return None
    if user.isdigit():
        return {"id": user}
    if user.startswith(("http://", "https://")):
        return {"url": user}
    return user


def register_people_commands(cli: click.Group) -> None:
    """Register read commands with the CLI."""

    @cli.command('profile')
    @click.argument('user', required=False)
    @click.option('--full', is_flag=True, help='Include the extended field set')
    @common_options
    @pass_context
    @require_auth
    def profile(ctx: LinkedInContext, user: Optional[str], full: bool, verbose: bool, quiet: bool, output_format: str):
        """
        Show a member profile.

        USER may be a member id, a public profile URL or a raw path
        segment. Defaults to the authenticated member.

        \b
        Examples:
          linkedin profile
          linkedin profile 12345 --full
          linkedin profile http://www.linkedin.com/in/someone
        """
        setup_logging(verbose, quiet)

        try:
            with LinkedInClient(ctx.config_manager.get()) as client:
                result = client.user_profile(_user_argument(user), include_custom_fields=full)
                print_result(result, output_format)
        except LinkedInError as e:
            print_error(str(e))
            sys.exit(1)

    @cli.command('connections')
    @click.argument('user', required=False)
    @click.option('--start', type=int, help='Offset of the first connection')
    @click.option('--count', type=int, help='Number of connections to return')
    @common_options
    @pass_context
    @require_auth
    def connections(
        ctx: LinkedInContext,
        user: Optional[str],
        start: Optional[int],
        count: Optional[int],
        verbose: bool,
        quiet: bool,
        output_format: str
    ):
        """List a member's connections."""
        setup_logging(verbose, quiet)

        params = {}
        if start is not None:
            params["start"] = start
        if count is not None:
            params["count"] = count

        try:
            with LinkedInClient(ctx.config_manager.get()) as client:
                result = client.user_connections(_user_argument(user), params)
                print_result(result, output_format)
        except LinkedInError as e:
            print_error(str(e))
            sys.exit(1)

    @cli.command('search')
    @click.argument('criteria', nargs=-1, required=True)
    @common_options
    @pass_context
    @require_auth
    def search(ctx: LinkedInContext, criteria: Tuple[str, ...], verbose: bool, quiet: bool, output_format: str):
        """
        Search for people.

        \b
        Examples:
          linkedin search keywords=python country-code=nl
          linkedin search first-name=Jan last-name=Jansen count=5
        """
        setup_logging(verbose, quiet)

        try:
            params = parse_parameters(list(criteria))
        except ValueError as e:
            print_error(str(e))
            sys.exit(1)

        try:
            with LinkedInClient(ctx.config_manager.get()) as client:
                result = client.search(params)
                print_result(result, output_format)
        except LinkedInError as e:
            print_error(str(e))
            sys.exit(1)

    @cli.command('updates')
    @click.argument('user', required=False)
    @click.option('--type', 'update_types', multiple=True, help='Update type filter (e.g. STAT, CONN)')
    @click.option('--count', type=int, help='Number of updates to return')
    @common_options
    @pass_context
    @require_auth
    def updates(
        ctx: LinkedInContext,
        user: Optional[str],
        update_types: Tuple[str, ...],
        count: Optional[int],
        verbose: bool,
        quiet: bool,
        output_format: str
    ):
        """Show the latest network activity."""
        setup_logging(verbose, quiet)

        params = {}
        if update_types:
            params["type"] = list(update_types)
        if count is not None:
            params["count"] = count

        try:
            with LinkedInClient(ctx.config_manager.get()) as client:
                result = client.network_activities(_user_argument(user), params)
                print_result(result, output_format)
        except LinkedInError as e:
            print_error(str(e))
            sys.exit(1)
