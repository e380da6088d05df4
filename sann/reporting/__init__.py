"""Reporting helpers for compiled networks."""

from .artifacts import write_layout

__all__ = ["write_layout"]
