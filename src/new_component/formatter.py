"""Source formatting through the Prettier CLI."""

from __future__ import annotations

import asyncio
import json
import logging
import tempfile
from collections.abc import Sequence
from pathlib import Path
from typing import Any, Protocol

from new_component.config import NewComponentConfig
from new_component.exceptions import FormatterError

logger = logging.getLogger(__name__)


class Formatter(Protocol):
    """Structural-typing protocol for source formatters."""

    async def format(self, source: str, *, filepath: Path) -> str:
        """Format *source* as if it lived at *filepath*.

        The path only selects the parser and the configuration to apply;
        nothing is read from or written to it.
        """
        ...


class PassthroughFormatter:
    """Returns source unchanged."""

    async def format(self, source: str, *, filepath: Path) -> str:
        del filepath
        return source


class PrettierFormatter:
    """Async wrapper around the ``prettier`` CLI.

    Source is piped over stdin with ``--stdin-filepath`` so Prettier infers
    the parser from the file extension and resolves the project's own
    configuration. Explicit *options* take precedence over that lookup.
    """

    def __init__(self, command: Sequence[str], options: dict[str, Any] | None = None) -> None:
        if not command:
            raise ValueError("prettier command must not be empty")
        self._command = list(command)
        self._options = options

    async def format(self, source: str, *, filepath: Path) -> str:
        """Run Prettier over *source*.

        Raises:
            FormatterError: If Prettier cannot be started or exits non-zero.
        """
        if self._options is None:
            return await self._run(source, filepath=filepath, config_path=None)

        with tempfile.TemporaryDirectory(prefix="new-component-") as tmp_dir:
            config_path = Path(tmp_dir) / "prettierrc.json"
            config_path.write_text(json.dumps(self._options), encoding="utf-8")
            return await self._run(source, filepath=filepath, config_path=config_path)

    async def _run(self, source: str, *, filepath: Path, config_path: Path | None) -> str:
        cmd = [*self._command, "--stdin-filepath", str(filepath)]
        if config_path is not None:
            cmd.extend(["--config", str(config_path)])
        logger.debug("Running: %s", " ".join(cmd))

        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                stdin=asyncio.subprocess.PIPE,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise FormatterError(f"could not start formatter: {self._command[0]} ({exc})") from exc

        stdout_bytes, stderr_bytes = await proc.communicate(source.encode("utf-8"))
        stderr = stderr_bytes.decode("utf-8") if stderr_bytes else ""
        if proc.returncode:
            raise FormatterError(f"formatter failed for {filepath.name}\n{stderr}".rstrip(), stderr=stderr)
        return stdout_bytes.decode("utf-8") if stdout_bytes else ""


def build_formatter(config: NewComponentConfig) -> Formatter:
    if not config.format:
        return PassthroughFormatter()
    return PrettierFormatter(config.prettier_command, options=config.prettier_config)


__all__ = ["Formatter", "PassthroughFormatter", "PrettierFormatter", "build_formatter"]
