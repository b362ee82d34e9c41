"""
Authentication commands for the LinkedIn CLI.

Commands:
- login: Authorize this application with OAuth
- logout: Clear the stored access token
- whoami: Show authentication status
"""

import sys
from typing import Optional

import click

from . import (
    LinkedInContext,
    pass_context,
    print_success,
    print_error,
    print_info,
    print_warning,
)
from ..api import LinkedInClient
from ..exceptions import AuthenticationError, LinkedInError
from ..utils import confirm_action, setup_logging


def register_auth_commands(cli: click.Group) -> None:
    """Register authentication commands with the CLI."""

    @cli.command('login')
    @click.option('--verifier', help='OAuth verifier (will prompt if not provided)')
    @click.option('--scope', help='Requested member permissions, e.g. "r_basicprofile r_network"')
    @click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
    @pass_context
    def login(
        ctx: LinkedInContext,
        verifier: Optional[str],
        scope: Optional[str],
        verbose: bool
    ):
        """
        Authorize this application and store the access token.

        \b
        Examples:
          linkedin login
          linkedin login --scope "r_fullprofile w_messages"
        """
        setup_logging(verbose)
        config_manager = ctx.config_manager
        config = config_manager.get()

        if not config.is_configured():
            print_error(
                "Consumer key and secret not configured.",
                "Run 'linkedin configure' first."
            )
            sys.exit(1)

        try:
            with LinkedInClient(config) as client:
                if scope:
                    client.get_request_token(scope=scope)
                else:
                    client.get_request_token()

                click.echo("\nOpen this URL in your browser and authorize the application:\n")
                click.echo(f"  {client.get_redirect_url()}\n")

                if not verifier:
                    verifier = click.prompt("Verifier code (or callback URL)")

                access_token = client.get_access_token(verifier)

                if not client.is_authorized():
                    print_error("Login succeeded but no access token was bound.")
                    sys.exit(1)

                config_manager.update(access_token=access_token)
                print_success("Login successful! Access token saved.")

        except AuthenticationError as e:
            print_error(f"Login failed: {e}")
            sys.exit(1)
        except LinkedInError as e:
            print_error(str(e))
            sys.exit(1)

    @cli.command('logout')
    @click.option('--yes', '-y', is_flag=True, help='Skip confirmation')
    @pass_context
    def logout(ctx: LinkedInContext, yes: bool):
        """
        Clear the stored access token.
        """
        if not yes:
            if not confirm_action("Clear stored access token?"):
                print_info("Cancelled.")
                return

        config = ctx.config_manager.update(access_token=None)
        print_success("Logged out successfully.")
        if config.is_authenticated():
            print_warning("LINKEDIN_TOKEN is still set and keeps this shell authenticated.")

    @cli.command('whoami')
    @click.option('--check', is_flag=True, help='Verify the token by fetching your profile')
    @pass_context
    def whoami(ctx: LinkedInContext, check: bool):
        """
        Show current authentication status.
        """
        config = ctx.config_manager.get()

        click.echo(
            "\nConsumer: "
            + (click.style("configured", fg="green") if config.is_configured()
               else click.style("not configured", fg="red"))
        )

        if not config.is_authenticated():
            click.echo("Authentication Status: " + click.style("Not authenticated", fg="red"))
            print_info("Run 'linkedin login' to authenticate.")
            return

        click.echo("Authentication Status: " + click.style("Authenticated", fg="green"))
        token = config.access_token.token
        click.echo(f"  Token: {token[:8]}..." if len(token) > 12 else f"  Token: {token}")

        if not check:
            return

        try:
            with LinkedInClient(config) as client:
                profile = client.user_profile()
                if profile.status_code == 200:
                    name = f"{profile.text('first-name', '')} {profile.text('last-name', '')}".strip()
                    click.echo(f"  Member: {name or '(unknown)'}")
                else:
                    print_error(f"Token check failed: HTTP {profile.status_code}")
                    sys.exit(1)
        except LinkedInError as e:
            print_error(str(e))
            sys.exit(1)
