"""Locate the monorepo's packages directory."""

import os

from git import Repo
from git.exc import InvalidGitRepositoryError, NoSuchPathError

PACKAGES_DIR_NAME = "packages"


def find_repo_root(start_dir):
    """Return the working tree root of the git repository containing *start_dir*, or None."""
    try:
        repo = Repo(start_dir, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError):
        return None
    return repo.working_tree_dir


def resolve_packages_root(packages_dir=None, *, start_dir=None):
    """Resolve where new workspace packages are created.

    An explicit *packages_dir* wins. Otherwise the packages directory sits at
    the root of the enclosing git repository, falling back to ./packages.
    """
    if packages_dir:
        return os.path.abspath(packages_dir)
    if start_dir is None:
        start_dir = os.getcwd()
    base = find_repo_root(start_dir) or start_dir
    return os.path.abspath(os.path.join(base, PACKAGES_DIR_NAME))
