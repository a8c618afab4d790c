#!/usr/bin/env python3

import os
import shutil
import sys
from pathlib import Path
from PIL import Image, ImageOps

from .errors import ErrorKind, Failure
from .metadata import filter_exif, strip_info
from .models import ImageDimensions


def read_image_info(in_path):
    """Return the first frame's stored size and the number of frames."""
    with Image.open(in_path) as img:
        # MPO is a JPEG with embedded previews; only the primary image counts.
        frames = 1 if img.format == "MPO" else getattr(img, "n_frames", 1)
        return ImageDimensions(*img.size), frames


def fit_size(size, target_width, target_height):
    """Scale `size` into the target box keeping its aspect ratio; 0 is auto."""
    width, height = size
    if target_width and target_height:
        scale = min(target_width / width, target_height / height)
    elif target_width:
        scale = target_width / width
    elif target_height:
        scale = target_height / height
    else:
        return size
    if scale >= 1:
        return size
    return max(1, round(width * scale)), max(1, round(height * scale))


def resize_with_metadata(in_path, out_path, target_width, target_height, dpi):
    with Image.open(in_path) as src:
        fmt = "JPEG" if src.format == "MPO" else src.format
        exif = filter_exif(src.getexif())
        img = ImageOps.exif_transpose(src)

    new_size = fit_size(img.size, target_width, target_height)
    if new_size != img.size:
        img = img.resize(new_size, Image.Resampling.LANCZOS)
    strip_info(img)

    save_kwargs = {"format": fmt, "dpi": (dpi, dpi)}
    if len(exif):
        save_kwargs["exif"] = exif.tobytes()
    img.save(out_path, **save_kwargs)
    return img.size


def set_creation_time(path, timestamp):
    """Set the creation time where the platform has one that can be written."""
    if sys.platform != "win32":
        return False
    from win32_setctime import setctime
    setctime(path, timestamp)
    return True


def copy_timestamps(in_path, out_path):
    st = os.stat(in_path)
    set_creation_time(out_path, st.st_mtime)
    os.utime(out_path, ns=(st.st_mtime_ns, st.st_mtime_ns))


def transform_image(in_path, out_path, decision, dpi, log):
    """Copy or resize `in_path` into the fresh path `out_path`, then carry its timestamps over."""
    in_path, out_path = Path(in_path), Path(out_path)
    try:
        if decision.skip:
            log.debug(f"{in_path.name} already fits, copying unchanged")
            shutil.copy2(in_path, out_path)
        else:
            log.debug(f"Resizing {in_path.name} to {decision.target_width}x{decision.target_height} at {dpi} DPI")
            final_size = resize_with_metadata(in_path, out_path, decision.target_width, decision.target_height, dpi)
            log.trace(f"{out_path.name} written at {final_size[0]}x{final_size[1]}")
        copy_timestamps(in_path, out_path)
    except Exception as e:
        if out_path.exists():
            out_path.unlink()
        return Failure(ErrorKind.TRANSFORM_FAILED, f"Unable to write {out_path} from {in_path}: {e}", in_path)
    return None
