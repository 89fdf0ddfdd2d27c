"""Progress reporting protocol for the scaffold pipeline.

The pipeline emits lifecycle events; consumers (e.g. the CLI's Rich
console output) implement ``ScaffoldProgress`` to render feedback.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class ScaffoldProgress(ABC):
    """Observer interface for scaffold pipeline events."""

    @abstractmethod
    def intro(self, name: str, directory: Path, lang: str) -> None:
        """Scaffolding of component *name* into *directory* is starting."""
        ...  # pragma: no cover

    @abstractmethod
    def item_done(self, message: str) -> None:
        """One step of the pipeline has completed."""
        ...  # pragma: no cover

    @abstractmethod
    def conclusion(self) -> None:
        """Every file was written."""
        ...  # pragma: no cover

    @abstractmethod
    def error(self, message: str) -> None:
        """The pipeline stopped with *message*."""
        ...  # pragma: no cover


class NullScaffoldProgress(ScaffoldProgress):
    """No-op implementation used when no output is requested."""

    def intro(self, name: str, directory: Path, lang: str) -> None:
        pass

    def item_done(self, message: str) -> None:
        pass

    def conclusion(self) -> None:
        pass

    def error(self, message: str) -> None:
        pass
