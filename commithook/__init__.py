#!/usr/bin/env python3

from .main import cli, configure_logging
from .validate import PatternMismatch, match_title, validate

__all__ = [
    "cli",
    "configure_logging",
    "match_title",
    "validate",
    "PatternMismatch",
]
