#!/usr/bin/env python3

from pathlib import Path

from ..utils.errors import ErrorKind, Failure, exit_code_of, report
from .pipeline import process_image


def run(request, config):
    """Rotate/resize one file. Returns 0 on success, -1 on any failure."""
    log = config.log
    in_path, out_path = Path(request.input_file), Path(request.output_file)

    with log.scope("file"):
        log.debug(f"Ensure that {in_path} exists")
        if not in_path.is_file():
            return report(log, Failure(ErrorKind.INPUT_NOT_FOUND, f"The InputFile {in_path} does not exist.", in_path))

        log.debug(f"Check if {out_path} exists")
        if out_path.exists():
            if not request.force_overwrite:
                return report(log, Failure(
                    ErrorKind.OUTPUT_EXISTS,
                    f"The OutputFile {out_path} exists and ForceOverwrite is not enabled.",
                    out_path,
                ))
            log.debug(f"Deleting {out_path} before overwriting it")
            try:
                out_path.unlink()
            except OSError as e:
                return report(log, Failure(ErrorKind.DELETE_FAILED, f"Unable to delete OutputFile {out_path}: {e}", out_path))

        return exit_code_of(process_image(in_path, out_path, config))
