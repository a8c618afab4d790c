#!/usr/bin/env python3

from dataclasses import dataclass
from enum import Enum

SUCCESS = 0
FAILURE = -1


class ErrorKind(Enum):
    INPUT_NOT_FOUND = "InputNotFound"
    OUTPUT_EXISTS = "OutputExists"
    DELETE_FAILED = "DeleteFailed"
    INCREMENT_EXHAUSTED = "IncrementExhausted"
    UNSUPPORTED_FRAME_COUNT = "UnsupportedFrameCount"
    TRANSFORM_FAILED = "TransformFailed"
    INVALID_FOLDER_MASK = "InvalidFolderMask"
    INVALID_TARGET_FOLDER = "InvalidTargetFolder"


# Kinds reported as warnings rather than errors. They still fail the run.
WARNING_KINDS = frozenset({ErrorKind.UNSUPPORTED_FRAME_COUNT})


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    message: str
    path: object = None

    @property
    def is_warning(self):
        return self.kind in WARNING_KINDS

    def __str__(self):
        return f"{self.kind.value}: {self.message}"


def report(log, failure):
    """Log a failure at its severity and hand back its exit code."""
    text = str(failure)
    if failure.path is not None and str(failure.path) not in text:
        text = f"{text} [{failure.path}]"
    if failure.is_warning:
        log.warn(text)
    else:
        log.error(text)
    return FAILURE


def exit_code_of(failure):
    return SUCCESS if failure is None else FAILURE
