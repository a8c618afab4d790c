#!/usr/bin/env python3

import sys
from contextlib import contextmanager
from datetime import datetime

# Ordered from most to least verbose.
LEVELS = {
    "trace": 0,
    "debug": 1,
    "information": 2,
    "warning": 3,
    "error": 4,
    "critical": 5,
    "none": 6,
}
DEFAULT_LEVEL = "warning"


def parse_level(name):
    """Map a --LogLevel value onto a known level name, falling back to Warning."""
    if name is None:
        return DEFAULT_LEVEL
    key = str(name).strip().lower()
    if key == "info":
        key = "information"
    return key if key in LEVELS else DEFAULT_LEVEL


class Log:
    HEADER = "\033[95m"
    OKBLUE = "\033[94m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    DIM = "\033[2m"
    ENDC = "\033[0m"

    TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S.%f"

    def __init__(self, level=DEFAULT_LEVEL, stream=None, color=None):
        self.level = parse_level(level)
        self.stream = stream if stream is not None else sys.stdout
        if color is None:
            isatty = getattr(self.stream, "isatty", None)
            color = bool(isatty and isatty())
        self.color = color
        self._scopes = []

    def enabled(self, level):
        return LEVELS[level] >= LEVELS[self.level] and self.level != "none"

    @contextmanager
    def scope(self, name):
        self._scopes.append(name)
        try:
            yield self
        finally:
            self._scopes.pop()

    def _paint(self, code, text):
        return f"{code}{text}{self.ENDC}" if self.color else text

    def _emit(self, level, tag, code, msg):
        if not self.enabled(level):
            return
        stamp = datetime.now().strftime(self.TIMESTAMP_FORMAT)
        scope = f" => {' => '.join(self._scopes)}" if self._scopes else ""
        print(f"{stamp} {self._paint(code, f'[{tag}]')}{scope} {msg}", file=self.stream)

    def trace(self, msg):
        self._emit("trace", "TRACE", self.DIM, msg)

    def debug(self, msg):
        self._emit("debug", "DEBUG", self.DIM, msg)

    def info(self, msg):
        self._emit("information", "INFO", self.OKBLUE, msg)

    def success(self, msg):
        self._emit("information", "SUCCESS", self.OKGREEN, msg)

    def warn(self, msg):
        self._emit("warning", "WARN", self.WARNING, msg)

    def error(self, msg):
        self._emit("error", "ERROR", self.FAIL, msg)

    def critical(self, msg):
        self._emit("critical", "CRITICAL", self.FAIL, msg)

    def header(self, msg):
        if self.enabled("information"):
            print(self._paint(self.HEADER, f"[---- {msg} ----]"), file=self.stream)

    def close(self):
        self.stream.flush()
