#!/usr/bin/env python3

from pathlib import Path

from ..utils.errors import ErrorKind, Failure, report
from ..utils.image_ops import read_image_info, transform_image
from ..utils.naming import increment_file_name
from ..utils.orientation import describe, resolve_resize


def _fail(log, failure):
    report(log, failure)
    return failure


def process_image(in_path, out_path, config):
    """Resize one image into `out_path`, or the next free numbered sibling of it.

    Shared by file and folder mode. Returns None on success or the Failure
    that stopped this image; every failure is logged here.
    """
    log = config.log
    in_path, out_path = Path(in_path), Path(out_path)

    log.debug(f"Check if {out_path} exists")
    if out_path.exists():
        out_path, failure = increment_file_name(out_path)
        if failure:
            return _fail(log, failure)

    log.info(f"Processing file {in_path} to {out_path}")

    try:
        dimensions, frames = read_image_info(in_path)
    except Exception as e:
        return _fail(log, Failure(ErrorKind.TRANSFORM_FAILED, f"Unable to read image {in_path}: {e}", in_path))

    if frames == 0:
        return _fail(log, Failure(ErrorKind.UNSUPPORTED_FRAME_COUNT, f"Unable to process file {in_path} as it has no frames.", in_path))
    if frames > 1:
        return _fail(log, Failure(ErrorKind.UNSUPPORTED_FRAME_COUNT, f"Unable to process file {in_path} as it has multiple frames.", in_path))

    decision = resolve_resize(dimensions, config.envelope)
    log.trace(describe(dimensions, config.envelope))

    failure = transform_image(in_path, out_path, decision, config.dpi, log)
    if failure:
        return _fail(log, failure)

    log.success(f"{in_path.name} -> {out_path} [{'copied' if decision.skip else 'resized'}]")
    return None
