"""Click entry point for the wspkg CLI."""

import click

from wspkg.materialize.command_runner import CommandRunner
from wspkg.materialize.materializer import ProjectMaterializer
from wspkg.prompts.menu import MenuConfig
from wspkg.prompts.sequencer import prompt_project_options
from wspkg.workspace import resolve_packages_root


@click.command("wspkg")
@click.option(
    "--packages-dir",
    envvar="WSPKG_PACKAGES_DIR",
    type=click.Path(file_okay=False),
    help="Directory that holds workspace packages (default: <git root>/packages).",
)
def main(packages_dir):
    """wspkg - create a new workspace package from a framework starter."""
    packages_root = resolve_packages_root(packages_dir)
    click.echo(f"Packages directory: {packages_root}")

    menu_config = MenuConfig()
    options = prompt_project_options(menu_config)

    materializer = ProjectMaterializer(packages_root, CommandRunner())
    materializer.materialize(options)
