"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version

from new_component.config import NewComponentConfig

_LANGUAGES = ("js", "ts")


def _package_version() -> str:
    try:
        return version("new-component")
    except PackageNotFoundError:
        return "0.0.0"


def _language(value: str) -> str:
    lang = value.strip().lower()
    if lang not in _LANGUAGES:
        raise argparse.ArgumentTypeError(f"invalid language: {value!r} (choose from js, ts)")
    return lang


def build_parser(config: NewComponentConfig | None = None) -> argparse.ArgumentParser:
    config = config or NewComponentConfig()

    parser = argparse.ArgumentParser(
        prog="new-component",
        description="Create a component directory with source, stylesheet and index files.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    parser.add_argument("name", nargs="?", metavar="componentName", help="Name of the component to create")
    parser.add_argument(
        "--lang",
        "-l",
        type=_language,
        default=config.lang,
        metavar="{js,ts}",
        help=f'Which language to use (default: "{config.lang}")',
    )
    parser.add_argument(
        "--dir",
        "-d",
        default=str(config.dir),
        metavar="pathToDirectory",
        help=f'Path to the "components" directory (default: "{config.dir}")',
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


__all__ = ["build_parser"]
