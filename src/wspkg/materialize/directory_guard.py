"""Overwrite confirmation for an existing target directory."""

import os
import shutil
import sys

import click


def guard_target_directory(target_dir):
    """Make sure *target_dir* is free for the generator.

    If the directory exists, ask before recursively removing it. Declining
    leaves it untouched and exits with status 0.
    """
    if not os.path.exists(target_dir):
        return

    if not click.confirm(f"Directory {target_dir} already exists. Overwrite it?", default=False):
        click.echo("Setup cancelled.")
        sys.exit(0)

    click.echo(f"Removing existing directory {target_dir}...")
    if os.path.isdir(target_dir) and not os.path.islink(target_dir):
        shutil.rmtree(target_dir)
    else:
        os.remove(target_dir)
