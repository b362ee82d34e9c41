"""
Configuration/settings commands for the LinkedIn CLI.

Commands:
- configure: Configure CLI settings
- config-clear: Clear all configuration
"""

from typing import Optional

import click

from .. import __prog_name__
from . import (
    LinkedInContext,
    pass_context,
    print_success,
    print_info,
)
from ..utils import confirm_action


def register_settings_commands(cli: click.Group) -> None:
    """Register configuration commands with the CLI."""

    @cli.command('configure')
    @click.option(
        '--consumer-key', '-k',
        help='OAuth consumer (API) key of your LinkedIn application'
    )
    @click.option(
        '--consumer-secret',
        help='OAuth consumer secret of your LinkedIn application'
    )
    @click.option(
        '--callback',
        help='OAuth callback URL ("oob" for out-of-band verifier codes)'
    )
    @click.option(
        '--timeout', '-t',
        type=int,
        help='Request timeout in seconds'
    )
    @click.option(
        '--no-verify-ssl',
        is_flag=True,
        help='Disable SSL certificate verification'
    )
    @click.option(
        '--show',
        is_flag=True,
        help='Show current configuration'
    )
    @pass_context
    def configure(
        ctx: LinkedInContext,
        consumer_key: Optional[str],
        consumer_secret: Optional[str],
        callback: Optional[str],
        timeout: Optional[int],
        no_verify_ssl: bool,
        show: bool
    ):
        """
        Configure LinkedIn CLI settings.

        \b
        Examples:
          linkedin configure --consumer-key KEY --consumer-secret SECRET
          linkedin configure --callback https://example.com/callback
          linkedin configure --show
        """
        config_manager = ctx.config_manager

        if show:
            config = config_manager.get()
            click.echo("\nCurrent Configuration:")
            click.echo(f"  Consumer Key:    {config.consumer_key or '(not configured)'}")
            click.echo(f"  Consumer Secret: {'*' * 10 + '...' if config.consumer_secret else '(not configured)'}")
            click.echo(f"  Callback URL:    {config.callback_url}")
            click.echo(f"  Access Token:    {'*' * 20 + '...' if config.is_authenticated() else '(not authenticated)'}")
            click.echo(f"  Timeout:         {config.timeout}s")
            click.echo(f"  Verify SSL:      {config.verify_ssl}")
            click.echo(f"  Config Path:     {config_manager.get_config_path()}")
            return

        # Interactive configuration if no options provided
        if not any([consumer_key, consumer_secret, callback, timeout, no_verify_ssl]):
            click.echo("Interactive configuration setup:")

            current = config_manager.get()

            consumer_key = click.prompt(
                "Consumer key",
                default=current.consumer_key or None
            )
            consumer_secret = click.prompt(
                "Consumer secret",
                default=current.consumer_secret or None,
                hide_input=True
            )
            callback = click.prompt(
                "Callback URL",
                default=current.callback_url
            )

        updates = {}
        if consumer_key:
            updates['consumer_key'] = consumer_key
        if consumer_secret:
            updates['consumer_secret'] = consumer_secret
        if callback:
            updates['callback_url'] = callback
        if timeout:
            updates['timeout'] = timeout
        if no_verify_ssl:
            updates['verify_ssl'] = False

        if updates:
            config_manager.update(**updates)
            print_success("Configuration saved.")
        else:
            print_info("No changes made.")

        click.echo(f"\nRun '{__prog_name__} login' to authorize the application.")

    @cli.command('config-clear')
    @click.option('--yes', '-y', is_flag=True, help='Skip confirmation')
    @pass_context
    def config_clear(ctx: LinkedInContext, yes: bool):
        """
        Remove all stored configuration, including the access token.
        """
        if not yes and not confirm_action("Clear all configuration?"):
            print_info("Cancelled.")
            return

        ctx.config_manager.clear()
        print_success("Configuration cleared.")
