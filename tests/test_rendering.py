"""Tests for template loading and substitution."""

from __future__ import annotations

import pytest

from new_component.exceptions import TemplateError
from new_component.rendering import PLACEHOLDER, load_template, render_index, render_template


class TestLoadTemplate:
    @pytest.mark.parametrize("lang", ["js", "ts"])
    def test_bundled_templates_contain_placeholder(self, lang: str) -> None:
        template = load_template(lang)

        assert PLACEHOLDER in template
        assert f"./{PLACEHOLDER}.module.css" in template

    def test_ts_template_declares_props(self) -> None:
        assert f"{PLACEHOLDER}Props" in load_template("ts")

    def test_unknown_language(self) -> None:
        with pytest.raises(TemplateError, match="coffee"):
            load_template("coffee")


class TestRenderTemplate:
    def test_replaces_every_occurrence(self) -> None:
        template = "COMPONENT_NAME COMPONENT_NAMEProps ./COMPONENT_NAME.module.css"

        assert render_template(template, "Button") == "Button ButtonProps ./Button.module.css"

    @pytest.mark.parametrize("lang", ["js", "ts"])
    def test_bundled_template_leaves_no_placeholder(self, lang: str) -> None:
        rendered = render_template(load_template(lang), "NavBar")

        assert PLACEHOLDER not in rendered
        assert "export function NavBar(" in rendered
        assert "import styles from './NavBar.module.css';" in rendered

    def test_template_without_placeholder_is_unchanged(self) -> None:
        assert render_template("const x = 1;\n", "Button") == "const x = 1;\n"


def test_render_index() -> None:
    assert render_index("Button") == "export * from './Button';\n"
