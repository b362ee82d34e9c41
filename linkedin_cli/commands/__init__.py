"""
CLI command modules for the LinkedIn CLI.

Shared context, decorators and output helpers used by the command modules.
"""

import sys
from typing import Optional

import click

from ..api import LinkedInClient, Result
from ..config import ConfigManager
from ..utils import (
    OutputFormat,
    print_error,
    print_info,
    print_json,
    print_success,
    print_warning,
)


class LinkedInContext:
    """CLI context object for sharing state between commands."""
    
    def __init__(self):
        self.config_manager: ConfigManager = None  # type: ignore[assignment]
        self.client: Optional[LinkedInClient] = None


pass_context = click.make_pass_decorator(LinkedInContext, ensure=True)


def common_options(f):
    """Common options for API commands."""
    f = click.option(
        '-v', '--verbose',
        is_flag=True,
        help='Enable verbose output'
    )(f)
    f = click.option(
        '-q', '--quiet',
        is_flag=True,
        help='Suppress non-essential output'
    )(f)
    f = click.option(
        '-f', '--format',
        'output_format',
        type=click.Choice([fmt.value for fmt in OutputFormat]),
        default=OutputFormat.XML.value,
        help='Output format'
    )(f)
    return f


def require_auth(f):
    """Decorator to require consumer credentials and an access token."""
    @click.pass_context
    def wrapper(click_ctx, *args, **kwargs):
        ctx = click_ctx.ensure_object(LinkedInContext)
        config = ctx.config_manager.get()
        
        if not config.is_configured():
            print_error(
                "LinkedIn CLI is not configured.",
                "Run 'linkedin configure' to set your consumer key and secret."
            )
            sys.exit(1)
        
        if not config.is_authenticated():
            print_error(
                "LinkedIn CLI is not authenticated.",
                "Run 'linkedin login' to authorize this application."
            )
            sys.exit(1)
        
        return click_ctx.invoke(f, *args, **kwargs)
    
    wrapper.__name__ = f.__name__
    wrapper.__doc__ = f.__doc__
    return wrapper


def print_result(result: Result, output_format: str) -> None:
    """Print a read result as XML or JSON."""
    if OutputFormat(output_format) == OutputFormat.JSON:
        print_json(result.to_dict())
    else:
        click.echo(result.body)


__all__ = [
    "LinkedInContext",
    "pass_context",
    "common_options",
    "require_auth",
    "print_result",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
