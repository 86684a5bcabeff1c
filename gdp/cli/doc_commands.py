"""CLI commands for Google Docs content."""

import click

from gdp.sdk import docs as sdk_docs
from .decorators import with_drive_service


@click.group()
def doc():
    """Commands for reading and writing document content."""
    pass


@doc.command('export')
@click.argument('doc_id')
@click.option('--mime-type', default='text/html', show_default=True,
              help='Export format.')
@with_drive_service
def export(service, doc_id, mime_type):
    """Print a document's exported content."""
    click.echo(sdk_docs.export_document(service, doc_id, mime_type=mime_type))


@doc.command('update')
@click.argument('doc_id')
@click.argument('html_file', type=click.File('r', encoding='utf-8'))
@with_drive_service
def update(service, doc_id, html_file):
    """Replace a document's content with the HTML in HTML_FILE ('-' for stdin)."""
    result = sdk_docs.update_document(service, doc_id, html_file.read())
    click.echo(f"Updated document {result['id']}.")
