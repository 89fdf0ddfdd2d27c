"""Exception hierarchy for new-component."""

from __future__ import annotations

from pathlib import Path


class NewComponentError(Exception):
    """Base exception for all new-component errors."""


class ConfigError(NewComponentError):
    """Configuration loading or validation failure."""


class ComponentNameError(NewComponentError):
    """The component name is missing or unusable."""


class MissingComponentNameError(ComponentNameError):
    """No component name was given."""


class InvalidComponentNameError(ComponentNameError):
    """The component name cannot be used as a directory name."""


class ComponentExistsError(NewComponentError):
    """A component directory already exists at the target path."""

    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(message)
        self.path = path


class TemplateError(NewComponentError):
    """Template lookup or read failure."""


class FormatterError(NewComponentError):
    """The code formatter failed or could not be started."""

    def __init__(self, message: str, *, stderr: str = "") -> None:
        super().__init__(message)
        self.stderr = stderr
