"""Command-line interface for new-component."""

from __future__ import annotations

import asyncio as asyncio
import logging as logging

from new_component.cli import create as create_command
from new_component.cli.app import main as main
from new_component.cli.output import RichScaffoldProgress as RichScaffoldProgress
from new_component.cli.parser import build_parser as build_parser
from new_component.config import load_config as load_config
from new_component.formatter import build_formatter as build_formatter
from new_component.scaffold import create_component as create_component

_run_create = create_command.run_create
