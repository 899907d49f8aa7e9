"""ProjectMaterializer: turns ProjectOptions into a generated workspace package."""

import os
import sys

from wspkg.materialize.command_runner import run_checked
from wspkg.materialize.dependencies import install_dependencies, resolve_dependencies
from wspkg.materialize.directory_guard import guard_target_directory
from wspkg.materialize.generators import INSTALL_COMMAND, generator_for
from wspkg.options import ProjectOptions


def _display_name(value):
    return getattr(value, "value", value)


class ProjectMaterializer:
    """Runs the generator and installers for one project using injected dependencies."""

    def __init__(self, packages_root, command_runner):
        self._packages_root = os.path.abspath(packages_root)
        self._command_runner = command_runner

    def target_dir(self, options: ProjectOptions) -> str:
        """Return the project directory, a direct child of the packages root.

        Exits with status 1 if the project name would resolve anywhere else.
        """
        target = os.path.normpath(os.path.join(self._packages_root, options.project_name))
        if os.path.dirname(target) != self._packages_root:
            print(f"Error: project name {options.project_name!r} does not name a directory "
                  f"directly under {self._packages_root}", file=sys.stderr)
            sys.exit(1)
        return target

    def materialize(self, options: ProjectOptions) -> str:
        """Create the project and return its directory.

        Exits with status 1 for an unsupported framework (before touching the
        filesystem), with status 0 if the user declines an overwrite, and with
        the failing command's status if a generator or installer fails.
        """
        strategy = generator_for(options.framework)
        if strategy is None:
            print(f"Unsupported framework: {_display_name(options.framework)}", file=sys.stderr)
            sys.exit(1)

        project_dir = self.target_dir(options)
        guard_target_directory(project_dir)

        print(
            f"Creating project {options.project_name} with "
            f"{_display_name(options.framework)} in {_display_name(options.language)}..."
        )
        os.makedirs(self._packages_root, exist_ok=True)

        cmd = strategy.build_command(options.project_name, options.language)
        run_checked(self._command_runner, cmd, cwd=self._packages_root, label=strategy.label)

        if strategy.needs_install:
            run_checked(self._command_runner, INSTALL_COMMAND, cwd=project_dir, label="npm install")

        plan = resolve_dependencies(options)
        install_dependencies(plan, project_dir, self._command_runner)

        print("Project setup complete.")
        print(f"Project directory: {project_dir}")
        return project_dir
