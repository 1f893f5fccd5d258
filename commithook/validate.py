#!/usr/bin/env python3

import logging
from typing import Optional

from .regex import LINE_BREAK_RE, TITLE_LINE_RE

__all__ = [
    "MATCH_MODE_WHOLE",
    "MATCH_MODE_FIRST_LINE",
    "MATCH_MODES",
    "DEFAULT_MATCH_MODE",
    "PatternMismatch",
    "match_title",
    "validate",
]

# The entire message must match; a message with a body never does
MATCH_MODE_WHOLE = "whole"
# Only the subject line must match; the body is ignored
MATCH_MODE_FIRST_LINE = "first-line"

MATCH_MODES = (MATCH_MODE_WHOLE, MATCH_MODE_FIRST_LINE)
DEFAULT_MATCH_MODE = MATCH_MODE_WHOLE


class PatternMismatch(ValueError):
    """Raised when a commit message does not have the ``<title>:<rest>`` shape."""

    def __init__(self, text: str, mode: str) -> None:
        super().__init__(
            f"Commit message {text!r} does not start with an alphanumeric title "
            "followed by a colon"
        )
        self.text = text
        self.mode = mode


def _checked_text(message: str, mode: str) -> str:
    if mode == MATCH_MODE_WHOLE:
        return message
    if mode == MATCH_MODE_FIRST_LINE:
        # Any line terminator ends the subject, including a lone \r
        return LINE_BREAK_RE.split(message, maxsplit=1)[0]
    raise ValueError(
        f"Unknown match mode {mode!r}, expected one of: {', '.join(MATCH_MODES)}"
    )


def match_title(message: str, mode: str = DEFAULT_MATCH_MODE) -> Optional[str]:
    """Return the title token of a commit message, or None if it does not match.

    Args:
        message: The full commit message text.
        mode: Either "whole" (the entire message must match) or "first-line"
            (only the subject line is checked).

    Returns:
        The alphanumeric token before the first colon, or None.

    Raises:
        ValueError: If mode is not a known match mode.
    """
    text = _checked_text(message, mode)
    match = TITLE_LINE_RE.fullmatch(text)
    logging.debug(f"Matching commit message in {mode} mode: {bool(match)}")
    if match is None:
        return None
    return match.group(1)


def validate(message: str, mode: str = DEFAULT_MATCH_MODE) -> str:
    """Validate a commit message and return its title.

    Raises:
        PatternMismatch: If the message does not have the required shape.
    """
    title = match_title(message, mode)
    if title is None:
        raise PatternMismatch(_checked_text(message, mode), mode)
    return title
