"""Map selected options to npm package lists and install them."""

from dataclasses import dataclass, field
from typing import List

from wspkg.materialize.command_runner import run_checked
from wspkg.options import CssFramework, ProjectOptions, StateLibrary

LINTER_PACKAGE = "eslint"

ROUTER_PACKAGES = ["react-router-dom"]
ROUTER_TYPE_PACKAGES = ["@types/react-router-dom"]

STATE_LIBRARY_PACKAGES = {
    StateLibrary.REDUX_TOOLKIT: ["@reduxjs/toolkit", "react-redux"],
    StateLibrary.REDUX_SAGA: ["redux", "redux-saga", "react-redux"],
    StateLibrary.ZUSTAND: ["zustand"],
    StateLibrary.MOBX: ["mobx", "mobx-react"],
}

STATE_LIBRARY_TYPE_PACKAGES = {
    StateLibrary.REDUX_TOOLKIT: ["@types/react-redux"],
    StateLibrary.REDUX_SAGA: ["@types/react-redux"],
}

# Listed in install order; the user's selection order does not matter.
CSS_DEV_PACKAGES = {
    CssFramework.TAILWIND: ["tailwindcss", "postcss", "autoprefixer"],
    CssFramework.SASS: ["sass"],
    CssFramework.LESS: ["less"],
    CssFramework.STYLED_COMPONENTS: [],
}

CSS_RUNTIME_PACKAGES = {
    CssFramework.STYLED_COMPONENTS: ["styled-components"],
}

CSS_TYPE_PACKAGES = {
    CssFramework.STYLED_COMPONENTS: ["@types/styled-components"],
}

TAILWIND_INIT_COMMAND = ["npx", "tailwindcss", "init", "-p"]


@dataclass
class DependencyPlan:
    """Packages and follow-up commands for one project."""

    runtime: List[str] = field(default_factory=list)
    dev: List[str] = field(default_factory=list)
    post_generate: List[List[str]] = field(default_factory=list)

    def add_runtime(self, packages):
        _extend_unique(self.runtime, packages)

    def add_dev(self, packages):
        _extend_unique(self.dev, packages)


def _extend_unique(target, packages):
    for package in packages:
        if package not in target:
            target.append(package)


def _add_react_options(plan, react_options, typescript):
    if react_options.include_router:
        plan.add_runtime(ROUTER_PACKAGES)
        if typescript:
            plan.add_dev(ROUTER_TYPE_PACKAGES)

    library = react_options.state_library
    if library is not None:
        plan.add_runtime(STATE_LIBRARY_PACKAGES[library])
        if typescript:
            plan.add_dev(STATE_LIBRARY_TYPE_PACKAGES.get(library, []))


def _add_css_frameworks(plan, selected, typescript):
    for css in CSS_DEV_PACKAGES:
        if css not in selected:
            continue
        plan.add_dev(CSS_DEV_PACKAGES[css])
        plan.add_runtime(CSS_RUNTIME_PACKAGES.get(css, []))
        if typescript:
            plan.add_dev(CSS_TYPE_PACKAGES.get(css, []))
        if css == CssFramework.TAILWIND:
            plan.post_generate.append(list(TAILWIND_INIT_COMMAND))


def resolve_dependencies(options: ProjectOptions) -> DependencyPlan:
    """Compute runtime and dev package lists for *options*.

    Pure: the same options always produce the same plan. Contributions are
    ordered React options, linter, then CSS frameworks.
    """
    plan = DependencyPlan()
    if options.react_options is not None:
        _add_react_options(plan, options.react_options, options.typescript)
    if options.use_linter:
        plan.add_dev([LINTER_PACKAGE])
    _add_css_frameworks(plan, set(options.css_frameworks), options.typescript)
    return plan


def install_dependencies(plan: DependencyPlan, project_dir: str, runner) -> None:
    """Run post-generation commands, then one npm install per non-empty list.

    Exits the process if any command fails.
    """
    for cmd in plan.post_generate:
        run_checked(runner, cmd, cwd=project_dir, label=" ".join(cmd))

    if plan.runtime:
        print("Installing additional dependencies...")
        run_checked(runner, ["npm", "install", *plan.runtime], cwd=project_dir, label="npm install")

    if plan.dev:
        print("Installing additional devDependencies...")
        run_checked(runner, ["npm", "install", "-D", *plan.dev], cwd=project_dir, label="npm install -D")
