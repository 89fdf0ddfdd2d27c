"""Template loading and name substitution."""

from __future__ import annotations

from importlib import resources

from new_component.exceptions import TemplateError

PLACEHOLDER = "COMPONENT_NAME"

_TEMPLATE_FILES = {
    "js": "js.js",
    "ts": "ts.tsx",
}


def load_template(lang: str) -> str:
    """Read the bundled component template for *lang*.

    Raises:
        TemplateError: If no template exists for *lang* or it cannot be read.
    """
    filename = _TEMPLATE_FILES.get(lang)
    if filename is None:
        raise TemplateError(f"no template for language: {lang}")

    template = resources.files("new_component") / "templates" / filename
    try:
        return template.read_text(encoding="utf-8")
    except OSError as exc:
        raise TemplateError(f"failed reading template: {filename}") from exc


def render_template(template: str, name: str) -> str:
    return template.replace(PLACEHOLDER, name)


def render_index(name: str) -> str:
    return f"export * from './{name}';\n"


__all__ = ["PLACEHOLDER", "load_template", "render_index", "render_template"]
