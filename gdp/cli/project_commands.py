"""CLI commands for document projects."""

import json
import click

from gdp.sdk import projects as sdk_projects
from gdp.sdk.drive import map_folder, map_folder_iterative, tree_to_dicts, count_nodes
from gdp.sdk.exceptions import RegistryError
from .decorators import with_drive_service


@click.group()
def project():
    """Commands for working with document projects."""
    pass


@project.command('tree')
@click.argument('folder_id')
@click.option('--iterative', is_flag=True,
              help='Walk the folder with an explicit stack instead of recursion.')
@with_drive_service
def tree(service, folder_id, iterative):
    """Print the document tree of a project folder as JSON."""
    mapper = map_folder_iterative if iterative else map_folder
    nodes = mapper(service, folder_id)
    click.echo(json.dumps(tree_to_dicts(nodes), indent=2))


@project.command('create')
@click.argument('name')
@with_drive_service
def create(service, name):
    """Create a new project folder and track it."""
    registry = sdk_projects.ProjectRegistry()
    result = sdk_projects.create_project(service, name, registry)
    click.echo(json.dumps(result, indent=2))


@project.command('list')
def list_projects():
    """List tracked projects, most recent last."""
    try:
        tracked = sdk_projects.ProjectRegistry().list()
    except RegistryError as e:
        raise click.ClickException(str(e))
    if not tracked:
        click.echo("No projects tracked.")
        return
    for entry in tracked:
        click.echo(f"- {entry['title']} (ID: {entry['project_id']})")


@project.command('track')
@click.argument('project_id')
@click.option('--title', default=None, help='Display title for the project.')
def track(project_id, title):
    """Start tracking an existing project folder."""
    try:
        entry = sdk_projects.ProjectRegistry().track(project_id, title)
    except Exception as e:
        raise click.ClickException(f"An error occurred: {e}")
    click.echo(f"Tracking '{entry['title']}' ({entry['project_id']}).")


@project.command('untrack')
@click.argument('project_id')
def untrack(project_id):
    """Stop tracking a project. The Drive folder is left alone."""
    try:
        untracked = sdk_projects.ProjectRegistry().untrack(project_id)
    except RegistryError as e:
        raise click.ClickException(str(e))
    if not untracked:
        raise click.ClickException(f"Project not tracked: {project_id}")
    click.echo(f"Untracked {project_id}.")


@project.command('refresh')
@with_drive_service
def refresh(service):
    """Untrack projects that were trashed in Drive."""
    removed = sdk_projects.refresh_projects(service, sdk_projects.ProjectRegistry())
    if removed:
        click.echo(f"Untracked {len(removed)} trashed project(s): {', '.join(removed)}")
    else:
        click.echo("All tracked projects are still in Drive.")


@project.command('last')
@with_drive_service
def last(service):
    """Print the tree of the most recently tracked project."""
    registry = sdk_projects.ProjectRegistry()
    nodes = sdk_projects.get_last_project(service, registry)
    if nodes is None:
        raise click.ClickException("No projects tracked.")
    latest = registry.latest()
    counts = count_nodes(nodes)
    click.echo(json.dumps({
        "project_id": latest["project_id"],
        "title": latest["title"],
        "documents": counts["documents"],
        "folders": counts["folders"],
        "tree": tree_to_dicts(nodes),
    }, indent=2))
