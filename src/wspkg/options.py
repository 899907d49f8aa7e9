"""Resolved project configuration produced by the prompt sequence."""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class Framework(Enum):
    REACT = "React"
    VUE = "Vue"
    SOLID = "Solid"
    REMIX = "Remix"
    NEXTJS = "Next.js"


class Language(Enum):
    JAVASCRIPT = "JavaScript"
    TYPESCRIPT = "TypeScript"


class StateLibrary(Enum):
    REDUX_TOOLKIT = "Redux Toolkit"
    REDUX_SAGA = "Redux Saga"
    ZUSTAND = "Zustand"
    MOBX = "MobX"


class CssFramework(Enum):
    TAILWIND = "Tailwind CSS"
    SASS = "Sass"
    LESS = "Less"
    STYLED_COMPONENTS = "Styled Components"


def validate_project_name(name):
    """Check that *name* is usable as a single directory under the packages root.

    Raises:
        ValueError: If the name is empty, absolute, contains a path
            separator, or is "." or "..".
    """
    if not name:
        raise ValueError("Project name cannot be empty")
    separators = {"/", os.sep, os.altsep} - {None}
    if os.path.isabs(name) or any(sep in name for sep in separators) or name in (".", ".."):
        raise ValueError(f"Project name must be a single directory name: {name!r}")
    return name


@dataclass(frozen=True)
class ReactOptions:
    """React-only sub-options."""

    include_router: bool = False
    state_library: Optional[StateLibrary] = None


@dataclass(frozen=True)
class ProjectOptions:
    """All answers needed to materialize one workspace package.

    Raises:
        ValueError: If the name is not a single directory name or react_options
            does not match the framework.
    """

    project_name: str
    framework: Framework
    language: Language
    use_linter: bool = False
    css_frameworks: Tuple[CssFramework, ...] = ()
    react_options: Optional[ReactOptions] = None

    def __post_init__(self):
        validate_project_name(self.project_name)
        is_react = self.framework == Framework.REACT
        if is_react and self.react_options is None:
            raise ValueError("React projects require react_options")
        if not is_react and self.react_options is not None:
            raise ValueError(f"react_options is only valid for React, not {self.framework.value}")
        object.__setattr__(self, "css_frameworks", tuple(dict.fromkeys(self.css_frameworks)))

    @property
    def typescript(self):
        return self.language == Language.TYPESCRIPT
