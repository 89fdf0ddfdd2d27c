"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import logging
import sys

from new_component.exceptions import ComponentExistsError, ComponentNameError, ConfigError, NewComponentError

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    import new_component.cli as cli

    progress = cli.RichScaffoldProgress()
    try:
        config = cli.load_config()
    except ConfigError as exc:
        progress.error(str(exc))
        return 1

    parser = cli.build_parser(config)
    args = parser.parse_args(argv)

    if args.verbose:
        cli.logging.basicConfig(level=cli.logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        cli.asyncio.run(cli._run_create(args, config, progress))
        return 0
    except (ComponentNameError, ComponentExistsError) as exc:
        progress.error(str(exc))
        return 0
    except (NewComponentError, OSError) as exc:
        logger.debug("Scaffolding failed", exc_info=True)
        progress.error(str(exc))
        return 1


__all__ = ["main"]
