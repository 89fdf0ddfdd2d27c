"""Public API surface for new-component."""

__version__ = "1.0.0"

from new_component.config import NewComponentConfig, load_config
from new_component.exceptions import (
    ComponentExistsError,
    ComponentNameError,
    ConfigError,
    FormatterError,
    InvalidComponentNameError,
    MissingComponentNameError,
    NewComponentError,
    TemplateError,
)
from new_component.formatter import Formatter, PassthroughFormatter, PrettierFormatter, build_formatter
from new_component.progress import NullScaffoldProgress, ScaffoldProgress
from new_component.rendering import load_template, render_index, render_template
from new_component.scaffold import ComponentPaths, create_component, plan_component, validate_component_name

__all__ = [
    "ComponentExistsError",
    "ComponentNameError",
    "ComponentPaths",
    "ConfigError",
    "Formatter",
    "FormatterError",
    "InvalidComponentNameError",
    "MissingComponentNameError",
    "NewComponentConfig",
    "NewComponentError",
    "NullScaffoldProgress",
    "PassthroughFormatter",
    "PrettierFormatter",
    "ScaffoldProgress",
    "TemplateError",
    "__version__",
    "build_formatter",
    "create_component",
    "load_config",
    "load_template",
    "plan_component",
    "render_index",
    "render_template",
    "validate_component_name",
]
