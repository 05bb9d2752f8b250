"""Frontends that drive a universe."""

from .cli import LifeConsole

__all__ = ["LifeConsole"]
