"""Interactive question sequence that produces a ProjectOptions."""

import click

from wspkg.options import (
    CssFramework,
    Framework,
    Language,
    ProjectOptions,
    ReactOptions,
    StateLibrary,
    validate_project_name,
)
from wspkg.prompts.menu import get_user_choice, get_user_choices

NO_STATE_LIBRARY = "None"


def _project_name(value):
    try:
        return validate_project_name(value.strip())
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc


def prompt_project_name() -> str:
    """Ask for the project name until a single directory name is given."""
    return click.prompt(
        "Enter the project name", default="", show_default=False, value_proc=_project_name,
    )


def _choose(prompt, enum_cls, config, default=1):
    members = list(enum_cls)
    choice = get_user_choice(prompt, default, [m.value for m in members], config=config)
    return members[choice - 1]


def _prompt_state_library(config):
    libraries = list(StateLibrary)
    labels = [lib.value for lib in libraries] + [NO_STATE_LIBRARY]
    choice = get_user_choice("Select a state management library:", 1, labels, config=config)
    if choice > len(libraries):
        return None
    return libraries[choice - 1]


def prompt_react_options(config=None) -> ReactOptions:
    """Ask the React-only questions: router, then state management."""
    include_router = click.confirm("Do you want to include React Router?", default=False)
    state_library = None
    if click.confirm("Do you need state management?", default=False):
        state_library = _prompt_state_library(config)
    return ReactOptions(include_router=include_router, state_library=state_library)


def prompt_css_frameworks(config=None):
    frameworks = list(CssFramework)
    selected = get_user_choices(
        "Select CSS frameworks/libraries:", [f.value for f in frameworks], config=config,
    )
    return tuple(frameworks[i - 1] for i in selected)


def prompt_project_options(config=None) -> ProjectOptions:
    """Run the full question sequence.

    Order: project name, framework, language, linter, React sub-options
    (React only), CSS frameworks.
    """
    project_name = prompt_project_name()
    framework = _choose("Select a framework/library:", Framework, config)
    language = _choose("Select the language:", Language, config)
    use_linter = click.confirm("Do you want to include ESLint for code linting?", default=False)

    react_options = None
    if framework == Framework.REACT:
        react_options = prompt_react_options(config)

    css_frameworks = prompt_css_frameworks(config)

    return ProjectOptions(
        project_name=project_name,
        framework=framework,
        language=language,
        use_linter=use_linter,
        css_frameworks=css_frameworks,
        react_options=react_options,
    )
