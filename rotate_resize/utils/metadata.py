#!/usr/bin/env python3

from PIL import Image, ExifTags

# Tags copied from the source into the output; everything else is dropped.
ALLOWED_BASE_TAGS = (
    0x010F,  # Make
    0x0110,  # Model
    0x013B,  # Artist
    0x8298,  # Copyright
)
ALLOWED_IFD_TAGS = {
    ExifTags.IFD.GPSInfo: (
        0x0001,  # GPSLatitudeRef
        0x0002,  # GPSLatitude
        0x0003,  # GPSLongitudeRef
        0x0004,  # GPSLongitude
    ),
    ExifTags.IFD.Exif: (
        0x9003,  # DateTimeOriginal
        0x9209,  # Flash
        0xA434,  # LensModel
    ),
}

# Image.info keys that carry metadata Pillow would otherwise write back out.
STRIPPED_INFO_KEYS = ("exif", "icc_profile", "xmp", "XML:com.adobe.xmp", "comment", "photoshop", "dpi")


def filter_exif(exif):
    kept = Image.Exif()
    for tag in ALLOWED_BASE_TAGS:
        if tag in exif:
            kept[tag] = exif[tag]
    for ifd, tags in ALLOWED_IFD_TAGS.items():
        source = exif.get_ifd(ifd)
        values = {tag: source[tag] for tag in tags if tag in source}
        if values:
            kept[ifd] = values
    return kept


def strip_info(img):
    for key in STRIPPED_INFO_KEYS:
        img.info.pop(key, None)
    return img
