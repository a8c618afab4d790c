#!/usr/bin/env python3

from pathlib import Path

from .errors import ErrorKind, Failure

MAX_INCREMENT = 999


def increment_file_name(path):
    """Return the first free `<stem>.NNN<suffix>` sibling of an existing path."""
    path = Path(path)
    for increment in range(MAX_INCREMENT + 1):
        candidate = path.with_name(f"{path.stem}.{increment:03d}{path.suffix}")
        if not candidate.exists():
            return candidate, None
    return None, Failure(
        ErrorKind.INCREMENT_EXHAUSTED,
        f"Unable to increment file name {path} as increments 000 to {MAX_INCREMENT:03d} are all taken.",
        path,
    )
