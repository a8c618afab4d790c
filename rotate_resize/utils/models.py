#!/usr/bin/env python3

from dataclasses import dataclass


@dataclass(frozen=True)
class ImageDimensions:
    width: int
    height: int

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"invalid image size: {self.width}x{self.height}")

    @property
    def is_landscape(self):
        return self.width > self.height


@dataclass(frozen=True)
class TargetEnvelope:
    """Requested bounds; 0 on an axis leaves it unconstrained."""

    horizontal: int = 0
    vertical: int = 0

    def __post_init__(self):
        if self.horizontal < 0 or self.vertical < 0:
            raise ValueError(f"invalid envelope: {self.horizontal}x{self.vertical}")

    @property
    def is_landscape(self):
        return self.horizontal > self.vertical


@dataclass(frozen=True)
class ResizeDecision:
    skip: bool
    target_width: int = 0
    target_height: int = 0
