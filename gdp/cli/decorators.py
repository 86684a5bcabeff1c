"""CLI decorators for Drive service setup and error reporting."""

import logging
from functools import wraps

import click

from gdp.sdk.auth import get_credentials, get_drive_service

logger = logging.getLogger(__name__)


def build_service(ctx: click.Context):
    """Build the Drive service once per invocation from the global options."""
    obj = ctx.ensure_object(dict)
    if obj.get("service") is None:
        creds, source = get_credentials(
            token_file=obj.get("token_file"),
            use_adc=obj.get("use_adc", False),
        )
        logger.debug(f"Using credentials from {source}")
        obj["service"] = get_drive_service(creds)
    return obj["service"]


def with_drive_service(f):
    """
    Decorator that passes the Drive service as the first argument.

    Any exception raised while connecting or running the command is logged
    and reported as 'Error: ...' with exit code 1.
    """
    @click.pass_context
    @wraps(f)
    def decorated_function(ctx, *args, **kwargs):
        try:
            service = build_service(ctx)
            return f(service, *args, **kwargs)
        except click.ClickException:
            raise
        except Exception as e:
            logger.debug(f"Command '{ctx.command.name}' failed", exc_info=True)
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1)
    return decorated_function
