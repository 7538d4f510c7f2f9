"""Command-line interface for foliowatch."""

from __future__ import annotations

import asyncio as asyncio
import logging as logging

from foliowatch import FolioWatch as FolioWatch
from foliowatch import load_config as load_config
from foliowatch.cli.app import main as main
from foliowatch.cli.commands import status as status_command
from foliowatch.cli.commands import watch as watch_command
from foliowatch.cli.parser import build_parser as build_parser

_format_watch_summary = watch_command.format_watch_summary
_format_status_summary = status_command.format_status_summary

_run_watch = watch_command.run_watch
_run_status = status_command.run_status
_run_clear = status_command.run_clear
