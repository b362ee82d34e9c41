"""
LinkedIn CLI - Command Line Interface for the LinkedIn REST API.

This module provides the main CLI entry point and registers the commands for:
- Configuration management
- OAuth authorization
- Profiles, connections, search and network activity
- Messages and status updates
"""

import sys
import logging
from pathlib import Path
from typing import Optional

import click

from . import __version__, __prog_name__
from .config import get_config_manager
from .commands import LinkedInContext
from .commands.auth import register_auth_commands
from .commands.people import register_people_commands
from .commands.posting import register_posting_commands
from .commands.settings import register_settings_commands
from .utils import print_error

logger = logging.getLogger(__name__)


# ============================================================================
# Main CLI Group
# ============================================================================

@click.group()
@click.version_option(version=__version__, prog_name=__prog_name__)
@click.option(
    '--config-dir',
    type=click.Path(path_type=Path),
    envvar='LINKEDIN_CONFIG_DIR',
    help='Custom configuration directory'
)
@click.pass_context
def cli(ctx, config_dir: Optional[Path]):
    """
    LinkedIn CLI - command line access to the LinkedIn REST API.

    \b
    Quick Start:
      1. Configure your application:  linkedin configure -k KEY --consumer-secret SECRET
      2. Authorize:                   linkedin login
      3. Show your profile:           linkedin profile
      4. Search for people:           linkedin search keywords=python

    \b
    Environment Variables:
      LINKEDIN_CONSUMER_KEY     - OAuth consumer key
      LINKEDIN_CONSUMER_SECRET  - OAuth consumer secret
      LINKEDIN_TOKEN            - OAuth access token
      LINKEDIN_TOKEN_SECRET     - OAuth access token secret
      LINKEDIN_CONFIG_DIR       - Custom configuration directory
    """
    ctx.ensure_object(LinkedInContext)
    ctx.obj.config_manager = get_config_manager(config_dir)


register_settings_commands(cli)
register_auth_commands(cli)
register_people_commands(cli)
register_posting_commands(cli)


# ============================================================================
# Entry Point
# ============================================================================

def main():
    """Main entry point for the CLI."""
    try:
        cli(auto_envvar_prefix='LINKEDIN')
    except KeyboardInterrupt:
        click.echo("\nAborted.")
        sys.exit(130)
    except Exception as e:
        logger.exception("Unexpected error")
        print_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
