"""CLI commands for gdp configuration."""

import click
import yaml

from gdp.sdk import config

# Allowed configuration keys and their allowed values
ALLOWED_CONFIG = {
    "auth.mode": {
        "allowed_values": ["token", "adc"]
    },
    "auth.token_file": {},
    "projects.file": {},
}


@click.group()
def config_group():
    """Commands for managing gdp configuration."""
    pass


@config_group.command('view')
def view_config():
    """Displays the current gdp configuration."""
    config_data = config.load_config()
    click.echo(yaml.safe_dump(config_data, default_flow_style=False))


@config_group.command('get')
@click.argument('key')
def get_config(key):
    """Prints a single configuration value."""
    value = config.get_config_value(key)
    if value is None:
        raise click.ClickException(f"Configuration key '{key}' is not set.")
    click.echo(value)


@config_group.command('set')
@click.argument('key')
@click.argument('value')
def set_config(key, value):
    """
    Sets a configuration value for a supported key.

    \b
    Supported Keys:
      - auth.mode: Set the authentication mode.
                   Allowed values: 'token', 'adc'.
      - auth.token_file: Authorized-user token JSON used in 'token' mode.
      - projects.file: Location of the tracked projects registry.

    \b
    Examples:
      gdp config set auth.mode adc
      gdp config set auth.token_file ~/.config/gdrive-projects/token.json
    """
    if key not in ALLOWED_CONFIG:
        raise click.UsageError(f"Configuration key '{key}' is not supported.")

    key_schema = ALLOWED_CONFIG[key]

    if "allowed_values" in key_schema and value not in key_schema["allowed_values"]:
        allowed = ", ".join(f"'{v}'" for v in key_schema["allowed_values"])
        raise click.UsageError(f"Invalid value '{value}' for key '{key}'. Allowed values are: {allowed}.")

    config.set_config_value(key, value)
    click.echo(f"✓ Set '{key}' to: {value}")

    if key == "auth.mode" and value == "adc":
        click.echo("\nTo use Application Default Credentials, ensure you have authenticated with gcloud:")
        click.echo("  gcloud auth application-default login --scopes=https://www.googleapis.com/auth/drive")
