"""Drive commands for gdp CLI."""

import json
import click

from gdp.sdk import drive
from .decorators import with_drive_service


@click.group()
def drive_group():
    """Google Drive operations."""
    pass


@drive_group.command('ls')
@click.argument('folder_id')
@with_drive_service
def list_children(service, folder_id):
    """List the immediate children of a Drive folder."""
    drive.validate_item_id(folder_id)
    items = drive.list_children(service, folder_id)
    click.echo(json.dumps(items, indent=2))


@drive_group.command('mkdir')
@click.argument('name')
@click.option('--parent-id', default=None, help='Parent folder ID.')
@with_drive_service
def create_folder(service, name, parent_id):
    """Create a new folder in Drive."""
    result = drive.create_folder(service, name=name, parent_id=parent_id)
    click.echo(json.dumps(result, indent=2))


@drive_group.command('new-doc')
@click.option('--folder-id', default=None, help='Folder to create the document in.')
@click.option('--title', default=None, help='Document title (default "Text Document").')
@with_drive_service
def create_document(service, folder_id, title):
    """Create an empty Google Doc."""
    result = drive.create_document(service, folder_id=folder_id, title=title)
    click.echo(json.dumps(result, indent=2))


@drive_group.command('info')
@click.argument('item_id')
@with_drive_service
def info(service, item_id):
    """Show metadata for a file or folder."""
    result = drive.get_item_metadata(service, item_id)
    click.echo(json.dumps(result, indent=2))


@drive_group.command('rm')
@click.argument('item_id')
@click.confirmation_option(prompt='Permanently delete this item?')
@with_drive_service
def delete(service, item_id):
    """Permanently delete a file or folder."""
    drive.delete_item(service, item_id)
    click.echo(f"Deleted {item_id}.")
