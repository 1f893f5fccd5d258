#!/usr/bin/env python3

"""Centralized regular expression patterns for commithook."""

import re

# Characters allowed in a commit title token (ASCII only)
TITLE_TOKEN_REGEX = r"[a-zA-Z0-9]+"

# Line terminators: \n, \r, NEL, LINE SEPARATOR, PARAGRAPH SEPARATOR
LINE_TERMINATOR_CHARS = r"\n\r\u0085\u2028\u2029"

# Anything up to the end of the line, including nothing
TITLE_REST_REGEX = f"[^{LINE_TERMINATOR_CHARS}]*"

# A complete commit title line: token, colon, then the rest of the line
TITLE_LINE_REGEX = f"^({TITLE_TOKEN_REGEX}):{TITLE_REST_REGEX}$"

# Use with fullmatch(); the rest of the line never crosses a line terminator
TITLE_LINE_RE = re.compile(TITLE_LINE_REGEX)

# Line break that ends the subject line; \r\n counts as one break
LINE_BREAK_RE = re.compile(f"\\r\\n|[{LINE_TERMINATOR_CHARS}]")
