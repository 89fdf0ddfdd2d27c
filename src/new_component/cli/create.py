"""Create command handler."""

from __future__ import annotations

import argparse
from pathlib import Path

from new_component.config import NewComponentConfig
from new_component.progress import ScaffoldProgress
from new_component.scaffold import ComponentPaths


async def run_create(
    args: argparse.Namespace,
    config: NewComponentConfig,
    progress: ScaffoldProgress,
) -> ComponentPaths:
    import new_component.cli as cli

    formatter = cli.build_formatter(config)
    return await cli.create_component(
        args.name,
        lang=args.lang,
        components_dir=Path(args.dir),
        formatter=formatter,
        progress=progress,
    )


__all__ = ["run_create"]
