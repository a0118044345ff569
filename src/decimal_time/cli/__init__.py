"""Command-line entry point."""

from .config import ClockConfig
from .main import cli, render_now

__all__ = ["ClockConfig", "cli", "render_now"]
