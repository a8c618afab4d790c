#!/usr/bin/env python3

from dataclasses import dataclass, field
from pathlib import Path

from .logging import Log
from .models import TargetEnvelope

DEFAULT_DPI = 264


@dataclass
class RunConfig:
    """Settings shared by every image in one run."""

    log: Log = field(default_factory=Log)
    envelope: TargetEnvelope = field(default_factory=TargetEnvelope)
    dpi: int = DEFAULT_DPI


@dataclass(frozen=True)
class FileRequest:
    input_file: Path
    output_file: Path
    force_overwrite: bool = False


@dataclass(frozen=True)
class FolderRequest:
    source_folder: str
    target_folder: Path


def build_config(args, stream=None):
    return RunConfig(
        log=Log(args.log_level, stream=stream),
        envelope=TargetEnvelope(args.horizontal_size, args.vertical_size),
        dpi=args.dpi,
    )


def build_request(args):
    if args.verb == "file":
        return FileRequest(Path(args.input_file), Path(args.output_file), args.force_overwrite)
    if args.verb == "folder":
        return FolderRequest(args.source_folder, Path(args.target_folder))
    raise ValueError(f"Unknown verb: {args.verb}")
