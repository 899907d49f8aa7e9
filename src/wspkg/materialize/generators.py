"""One scaffolding generator strategy per framework.

Every generator runs with the packages root as its working directory and
receives only the project's base name as its target.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List

from wspkg.options import Framework, Language


@dataclass(frozen=True)
class GeneratorStrategy:
    """How to invoke one framework's generator."""

    label: str
    build_command: Callable[[str, Language], List[str]]
    needs_install: bool = False


def _react_command(name, language):
    cmd = ["npx", "create-react-app", name]
    if language == Language.TYPESCRIPT:
        cmd += ["--template", "typescript"]
    return cmd


def _vue_command(name, language):
    template = "vue-ts" if language == Language.TYPESCRIPT else "vue"
    return ["npm", "create", "vite@latest", name, "--", "--template", template]


def _solid_command(name, language):
    template = "ts" if language == Language.TYPESCRIPT else "js"
    return ["npx", "degit", f"solidjs/templates/{template}", name]


def _remix_command(name, language):
    cmd = ["npx", "create-remix@latest", name]
    if language == Language.TYPESCRIPT:
        cmd.append("--typescript")
    return cmd


def _next_command(name, language):
    cmd = ["npx", "create-next-app@latest", name]
    if language == Language.TYPESCRIPT:
        cmd.append("--typescript")
    return cmd


GENERATORS: Dict[Framework, GeneratorStrategy] = {
    Framework.REACT: GeneratorStrategy("create-react-app", _react_command),
    Framework.VUE: GeneratorStrategy("create-vite", _vue_command, needs_install=True),
    Framework.SOLID: GeneratorStrategy("degit", _solid_command, needs_install=True),
    Framework.REMIX: GeneratorStrategy("create-remix", _remix_command),
    Framework.NEXTJS: GeneratorStrategy("create-next-app", _next_command),
}

INSTALL_COMMAND = ["npm", "install"]


def generator_for(framework):
    """Return the strategy for *framework*, or None if there is none."""
    return GENERATORS.get(framework)
