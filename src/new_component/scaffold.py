"""Component directory scaffolding."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from new_component.exceptions import ComponentExistsError, InvalidComponentNameError, MissingComponentNameError
from new_component.formatter import Formatter
from new_component.progress import NullScaffoldProgress, ScaffoldProgress
from new_component.rendering import load_template, render_index, render_template

logger = logging.getLogger(__name__)

_SOURCE_EXTENSIONS = {"js": "js", "ts": "tsx"}
_INDEX_EXTENSIONS = {"js": "js", "ts": "ts"}
_STYLES_EXTENSION = "css"


@dataclass(frozen=True)
class ComponentPaths:
    """Every path a scaffolded component occupies."""

    component_dir: Path
    component_file: Path
    styles_file: Path
    index_file: Path

    def files(self) -> tuple[Path, Path, Path]:
        return (self.component_file, self.styles_file, self.index_file)


def validate_component_name(name: str | None) -> str:
    """Return the stripped component name.

    Raises:
        MissingComponentNameError: If *name* is missing or blank.
        InvalidComponentNameError: If *name* cannot be used as a single
            directory name.
    """
    if name is None or not name.strip():
        raise MissingComponentNameError(
            "Sorry, you need to specify a name for your component like this: new-component <name>"
        )
    candidate = name.strip()
    if candidate in {".", ".."} or "/" in candidate or "\\" in candidate:
        raise InvalidComponentNameError(
            f"'{candidate}' is not a valid component name. Use a plain name such as Button or NavBar."
        )
    return candidate


def plan_component(name: str, *, lang: str, components_dir: Path) -> ComponentPaths:
    """Work out where each file of component *name* goes."""
    component_dir = components_dir / name
    return ComponentPaths(
        component_dir=component_dir,
        component_file=component_dir / f"{name}.{_SOURCE_EXTENSIONS[lang]}",
        styles_file=component_dir / f"{name}.module.{_STYLES_EXTENSION}",
        index_file=component_dir / f"index.{_INDEX_EXTENSIONS[lang]}",
    )


def _write(path: Path, content: str) -> None:
    logger.debug("Writing %s (%d bytes)", path, len(content))
    path.write_text(content, encoding="utf-8")


async def create_component(
    name: str | None,
    *,
    lang: str,
    components_dir: Path,
    formatter: Formatter,
    progress: ScaffoldProgress | None = None,
) -> ComponentPaths:
    """Create the directory and files for a new component.

    Nothing is written when a directory already exists at the component's
    path or when formatting fails. Steps run strictly in order; the first
    failure propagates.

    Raises:
        MissingComponentNameError: If no name was given.
        InvalidComponentNameError: If the name is path-like.
        ComponentExistsError: If the component directory already exists.
        TemplateError: If the template cannot be loaded.
        FormatterError: If formatting fails.
        OSError: If a directory or file cannot be created.
    """
    progress = progress or NullScaffoldProgress()
    component_name = validate_component_name(name)
    paths = plan_component(component_name, lang=lang, components_dir=components_dir)

    progress.intro(component_name, paths.component_dir, lang)

    logger.debug("Ensuring components directory %s", components_dir)
    components_dir.mkdir(parents=True, exist_ok=True)

    if paths.component_dir.exists():
        raise ComponentExistsError(
            "Looks like this component already exists! "
            f"There's already a component at {paths.component_dir}.\n"
            "Please delete this directory and try again.",
            path=paths.component_dir,
        )

    # Nothing under component_dir exists until both sources are formatted.
    template = render_template(load_template(lang), component_name)
    component_source = await formatter.format(template, filepath=paths.component_file)
    index_source = await formatter.format(render_index(component_name), filepath=paths.index_file)

    paths.component_dir.mkdir()
    progress.item_done("Directory created.")

    _write(paths.component_file, component_source)
    progress.item_done("Component built and saved to disk.")

    _write(paths.styles_file, "")

    _write(paths.index_file, index_source)
    progress.item_done("Index file built and saved to disk.")

    progress.conclusion()
    return paths


__all__ = ["ComponentPaths", "create_component", "plan_component", "validate_component_name"]
