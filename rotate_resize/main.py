#!/usr/bin/env python3

import argparse
import sys

from .utils.config import DEFAULT_DPI, FileRequest, FolderRequest, build_config, build_request
from .utils.errors import FAILURE
from .utils.logging import LEVELS

from .mods import single_file
from .mods import folder

LOG_LEVEL_HELP = "The level of output from the logger (None, Critical, Error, Warning, Information, Debug, Trace)."


def non_negative_int(value):
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"{value} is negative")
    return number


def add_common_options(p):
    # -h is taken by --HorizontalSize, so help is only reachable as --help.
    p.add_argument("--help", action="help", help="Show this help message and exit")
    p.add_argument("-h", "--HorizontalSize", dest="horizontal_size", type=non_negative_int, default=0, help="The Horizontal Size to scale to (or 0 for Auto)")
    p.add_argument("-v", "--VerticalSize", dest="vertical_size", type=non_negative_int, default=0, help="The Vertical Size to scale to (or 0 for Auto)")
    p.add_argument("-d", "--DPI", dest="dpi", type=non_negative_int, default=DEFAULT_DPI, help="The DPI to apply to the output scaled image.")
    p.add_argument("-l", "--LogLevel", dest="log_level", default="Warning", help=LOG_LEVEL_HELP)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="rotate-resize",
        description="Rotate (if needed) and resize (if needed) images, one file or a whole folder.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example:
  rotate-resize file --InputFile source.jpg --OutputFile target.jpg --HorizontalSize 2048
  rotate-resize folder --SourceFolder "/photos/*.jpg" --TargetFolder /resized -h 2048 -v 1024
""",
    )

    subparsers = parser.add_subparsers(dest="verb", required=True, help="The processing mode to use.")

    p_file = subparsers.add_parser("file", add_help=False, help="Individual file processing")
    p_file.add_argument("-i", "--InputFile", dest="input_file", required=True, help="The name of the image file to be rotated (if needed) and resized (if needed).")
    p_file.add_argument("-o", "--OutputFile", dest="output_file", required=True, help="The name of the image file to be saved into.")
    p_file.add_argument("-f", "--ForceOverwrite", dest="force_overwrite", action="store_true", help="Will replace the target file if it already exists.")
    add_common_options(p_file)

    p_folder = subparsers.add_parser("folder", add_help=False, help="Bulk folder with mask processing")
    p_folder.add_argument("-s", "--SourceFolder", dest="source_folder", required=True, help="The folder and file mask of the images to process, e.g. /photos/*.jpg")
    p_folder.add_argument("-t", "--TargetFolder", dest="target_folder", required=True, help="The folder to save the processed images into.")
    add_common_options(p_folder)

    return parser


def parse_args(argv):
    parser = build_parser()
    if not argv:
        parser.print_help(sys.stderr)
        return None
    try:
        return parser.parse_args(argv)
    except SystemExit:
        # argparse has already printed usage or help.
        return None


def main(argv=None, stream=None):
    argv = sys.argv[1:] if argv is None else list(argv)
    args = parse_args(argv)
    if args is None:
        return FAILURE

    config = build_config(args, stream=stream)
    log = config.log
    request = build_request(args)
    log.debug(f"Log level {log.level} (of {', '.join(LEVELS)})")
    log.info(f"Starting rotate-resize in {args.verb} mode")

    try:
        if isinstance(request, FileRequest):
            result = single_file.run(request, config)
        elif isinstance(request, FolderRequest):
            result = folder.run(request, config)
        else:
            result = FAILURE
    except Exception as e:
        log.critical(f"A critical error occurred: {e}")
        result = FAILURE

    try:
        log.close()
    except Exception:
        # Already on the way out.
        pass
    return result


if __name__ == "__main__":
    sys.exit(main())
