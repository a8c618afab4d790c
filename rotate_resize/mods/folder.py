#!/usr/bin/env python3

import os
from pathlib import Path
from tqdm import tqdm

from ..utils.errors import FAILURE, SUCCESS, ErrorKind, Failure, exit_code_of, report
from .pipeline import process_image

MIN_MASK_LENGTH = 3


def split_source(source_folder):
    """Split `dir/mask` into an existing directory and a usable glob mask."""
    folder, mask = os.path.split(source_folder)
    src_dir = Path(folder) if folder else Path(".")

    def invalid(reason):
        return None, None, Failure(ErrorKind.INVALID_FOLDER_MASK, f"The SourceFolder {source_folder} is not valid ({reason}).", source_folder)

    if not src_dir.is_dir():
        return invalid("folder does not exist")
    if not mask:
        return invalid("mask is missing")
    if len(mask) < MIN_MASK_LENGTH:
        return invalid("mask is too short")
    if os.path.splitext(mask)[1] in ("", "."):
        return invalid("mask extension is missing")
    return src_dir, mask, None


def prepare_target(target_folder):
    target = Path(target_folder)
    if target.exists() and not target.is_dir():
        return Failure(ErrorKind.INVALID_TARGET_FOLDER, f"The TargetFolder {target} is not a folder.", target)
    try:
        target.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        return Failure(ErrorKind.INVALID_TARGET_FOLDER, f"Unable to create TargetFolder {target}: {e}", target)
    return None


def find_images(src_dir, mask):
    return sorted(p for p in src_dir.glob(mask) if p.is_file())


def run(request, config):
    """Rotate/resize every file matching the mask. Returns the worst per-file code."""
    log = config.log

    with log.scope("folder"):
        src_dir, mask, failure = split_source(request.source_folder)
        if failure:
            return report(log, failure)

        failure = prepare_target(request.target_folder)
        if failure:
            return report(log, failure)

        img_files = find_images(src_dir, mask)
        if not img_files:
            log.info(f"No files in {src_dir} match {mask}.")
            return SUCCESS

        log.header(f"{src_dir / mask} -> {request.target_folder}")
        log.info(f"Processing {len(img_files)} images from {src_dir} into {request.target_folder}...")

        result = SUCCESS
        failed = 0
        for in_path in tqdm(img_files, desc="Resizing", unit="img", disable=not log.enabled("information")):
            out_path = Path(request.target_folder) / in_path.name
            try:
                code = exit_code_of(process_image(in_path, out_path, config))
            except Exception as e:
                log.error(f"Unexpected error while processing {in_path}: {e}")
                code = FAILURE
            if code < SUCCESS:
                failed += 1
            result = min(result, code)

        if failed:
            log.warn(f"{failed} of {len(img_files)} images failed.")
        else:
            log.success(f"All {len(img_files)} images processed.")
        return result
