#!/usr/bin/env python3

from .models import ResizeDecision


def resolve_resize(dimensions, envelope):
    """Decide whether an image needs scaling and to what width/height.

    A landscape source lines its width up with the horizontal bound. Anything
    else (portrait or square) is treated as rotated a quarter turn, so its
    width lines up with the vertical bound and its height with the horizontal
    one. Only the source orientation picks the mapping; the orientation of the
    envelope itself does not change it.

    A bound larger than the source side it maps to is reset to 0 (auto) so the
    image is never scaled up.
    """
    if dimensions.is_landscape:
        along_horizontal, along_vertical = dimensions.width, dimensions.height
    else:
        along_horizontal, along_vertical = dimensions.height, dimensions.width

    if along_horizontal <= envelope.horizontal and along_vertical <= envelope.vertical:
        return ResizeDecision(skip=True)

    horizontal = 0 if envelope.horizontal > along_horizontal else envelope.horizontal
    vertical = 0 if envelope.vertical > along_vertical else envelope.vertical

    if dimensions.is_landscape:
        return ResizeDecision(skip=False, target_width=horizontal, target_height=vertical)
    return ResizeDecision(skip=False, target_width=vertical, target_height=horizontal)


def describe(dimensions, envelope):
    source = "landscape" if dimensions.is_landscape else "portrait"
    target = "landscape" if envelope.is_landscape else "portrait"
    swap = "" if dimensions.is_landscape else ", axes swapped"
    return (
        f"source {dimensions.width}x{dimensions.height} ({source}), "
        f"envelope {envelope.horizontal}x{envelope.vertical} ({target}){swap}"
    )
