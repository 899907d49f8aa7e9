"""Tests for the ProjectOptions invariants."""

import pytest

from wspkg.options import (
    CssFramework,
    Framework,
    Language,
    ProjectOptions,
    ReactOptions,
    validate_project_name,
)


@pytest.mark.unit
class TestReactOptionsInvariant:

    def test_react_with_react_options_is_valid(self):
        options = ProjectOptions("web", Framework.REACT, Language.JAVASCRIPT, react_options=ReactOptions())
        assert options.react_options == ReactOptions()

    def test_react_without_react_options_is_rejected(self):
        with pytest.raises(ValueError):
            ProjectOptions("web", Framework.REACT, Language.JAVASCRIPT)

    @pytest.mark.parametrize("framework", [f for f in Framework if f != Framework.REACT])
    def test_other_frameworks_reject_react_options(self, framework):
        with pytest.raises(ValueError):
            ProjectOptions("web", framework, Language.JAVASCRIPT, react_options=ReactOptions())

    @pytest.mark.parametrize("framework", [f for f in Framework if f != Framework.REACT])
    def test_other_frameworks_without_react_options_are_valid(self, framework):
        assert ProjectOptions("web", framework, Language.TYPESCRIPT).react_options is None


@pytest.mark.unit
class TestProjectOptionsFields:

    def test_empty_name_is_rejected(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            ProjectOptions("", Framework.VUE, Language.JAVASCRIPT)

    def test_duplicate_css_frameworks_collapse(self):
        options = ProjectOptions(
            "web", Framework.VUE, Language.JAVASCRIPT,
            css_frameworks=(CssFramework.SASS, CssFramework.SASS, CssFramework.LESS),
        )
        assert options.css_frameworks == (CssFramework.SASS, CssFramework.LESS)

    def test_typescript_flag(self):
        assert ProjectOptions("web", Framework.VUE, Language.TYPESCRIPT).typescript
        assert not ProjectOptions("web", Framework.VUE, Language.JAVASCRIPT).typescript

    def test_labels_match_menu_text(self):
        assert Framework.NEXTJS.value == "Next.js"
        assert CssFramework.TAILWIND.value == "Tailwind CSS"


@pytest.mark.unit
class TestProjectNameMustBeSingleDirectory:

    @pytest.mark.parametrize("name", [".", "..", "a/b", "../escape", "/tmp/outside"])
    def test_rejects_path_like_names(self, name):
        with pytest.raises(ValueError, match="single directory name"):
            ProjectOptions(name, Framework.VUE, Language.JAVASCRIPT)

    def test_validate_returns_plain_name(self):
        assert validate_project_name("my-app") == "my-app"

    def test_dots_inside_a_name_are_allowed(self):
        assert ProjectOptions("app.v2", Framework.VUE, Language.JAVASCRIPT).project_name == "app.v2"
